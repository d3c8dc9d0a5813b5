from algorithm.GradientTD import GradientTD


class GTD2(GradientTD):
    """
    theta += alpha * (phi - gamma * phi') * w(s)
    """

    def _direction(self, residual, estimate, phi_s, phi_ns):
        gamma = self.gamma
        return phi_s.merge(phi_ns, lambda x, y: estimate * (x - gamma * y))
