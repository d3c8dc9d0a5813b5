"""
Linear action-value function held in a PyTorch module.

Gradients are taken with autograd instead of being written out by hand, so the same controllers can drive
    torch-backed value functions.
"""
from typing import List

import numpy as np
import torch
from torch.nn import Linear, Sequential

from config import Config, ConfigItemDesc
from config.moduleframe import AbstractModuleFrame
from function_approximator.base import StateActionFunction, Differentiable, UpdateError
from function_approximator.basis_function import BasisFunction
from function_approximator.gradient import ColumnarGradient, DenseGradient, GradientBuffer

DEVICES = {'cuda': torch.device('cuda'),
           'cpu': torch.device('cpu')}


class TorchLinearQ(StateActionFunction, Differentiable, AbstractModuleFrame):

    @classmethod
    def get_class_config(cls) -> List[ConfigItemDesc]:
        return [
            ConfigItemDesc('device', lambda s: s in DEVICES,
                           info="Default cpu. Choices: " + ' or '.join([k for k in DEVICES]),
                           default='cpu',
                           optional=True),
        ]

    def __init__(self, config: Config, basis: BasisFunction, n_actions: int):
        """
        Q(s, .) = W phi(s) with W initialised to zero. Weights are exposed as (n_features, n_actions) like the
            numpy linear functions.
        """
        self.config = config.find_config_for_instance(self)
        if n_actions < 1:
            raise ValueError('n_actions must be >= 1')
        self.basis = basis
        self.device = DEVICES[self.config.device]
        self.model = self._create_model(basis.size(), n_actions).double().to(self.device)
        with torch.no_grad():
            self._layer.weight.zero_()

    @staticmethod
    def _create_model(n_features, n_actions) -> Sequential:
        return Sequential(Linear(n_features, n_actions, bias=False))

    @property
    def _layer(self) -> Linear:
        return self.model[0]

    @property
    def weights(self) -> np.ndarray:
        # Shares memory with the module on cpu; a copy otherwise
        return self.to_numpy(self._layer.weight).T

    @property
    def weights_dim(self):
        out_features, in_features = self._layer.weight.shape
        return in_features, out_features

    @property
    def n_actions(self):
        return self._layer.out_features

    def _input(self, state) -> torch.Tensor:
        phi = np.asarray(self.basis.project(state), dtype=np.float64).reshape(-1)
        return torch.tensor(phi, dtype=torch.float64, device=self.device)

    def evaluate(self, state, action):
        return float(self.evaluate_all(state)[action])

    def evaluate_all(self, state):
        with torch.no_grad():
            return self.to_numpy(self.model(self._input(state)))

    def update(self, state, action, error):
        gradient = ColumnarGradient(self.weights_dim, {action: self.to_numpy(self._input(state))})
        self.update_grad_scaled(gradient, error)

    def grad(self, state, action) -> DenseGradient:
        self.model.zero_grad()
        out = self.model(self._input(state))[action]
        out.backward()
        g = self.to_numpy(self._layer.weight.grad).T.copy()
        self.model.zero_grad()
        return DenseGradient(g)

    def zero_gradient(self):
        return DenseGradient.zeros(self.weights_dim)

    def update_grad_scaled(self, gradient: GradientBuffer, scale: float):
        if gradient.dim != self.weights_dim:
            raise ValueError('Gradient of shape {} does not match weights of shape {}.'
                             .format(gradient.dim, self.weights_dim))
        delta = torch.tensor(gradient.to_dense().T, dtype=torch.float64, device=self.device)
        try:
            with torch.no_grad():
                self._layer.weight.add_(delta, alpha=float(scale))
        except RuntimeError as e:
            raise UpdateError('Could not apply update to {}: {}'.format(type(self).__name__, e)) from e

    def to_numpy(self, tensor) -> np.ndarray:
        return tensor.detach().cpu().numpy()
