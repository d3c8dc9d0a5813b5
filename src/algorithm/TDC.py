from algorithm.GradientTD import GradientTD


class TDC(GradientTD):
    """
    TD with gradient correction: theta += alpha * (delta * phi - gamma * w(s) * phi')
    """

    def _direction(self, residual, estimate, phi_s, phi_ns):
        gamma = self.gamma
        return phi_s.merge(phi_ns, lambda x, y: residual * x - gamma * estimate * y)
