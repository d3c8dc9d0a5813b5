"""
Bounded queue of pending n-step backups.

Each entry records one step of experience together with the quantities needed to fold it into an n-step return:
    the one-step residual, the degree of sampling sigma, and the target / behaviour probabilities of the action
    taken in the next state.
"""
from collections import deque
from typing import Any, NamedTuple, Tuple

import numpy as np

from model.base import ElementModel


class BackupEntry(NamedTuple):
    state: Any
    action: int
    q: float
    residual: float
    sigma: float
    pi: float
    mu: float
    # Entries closing an episode carry no continuation, so they add no importance-sampling factor
    terminal: bool = False


class BackupQueue(ElementModel):

    def __init__(self, n_steps: int):
        if n_steps < 1:
            raise ValueError('n_steps must be >= 1, got {}'.format(n_steps))
        self.n_steps = n_steps
        self._entries = deque(maxlen=n_steps + 1)

    @staticmethod
    def get_name():
        return 'backup_queue'

    def push(self, entry: BackupEntry):
        self._entries.append(entry)

    def pop(self) -> BackupEntry:
        """
        Remove and return the oldest entry.
        """
        return self._entries.popleft()

    def clear(self):
        self._entries.clear()

    def reset(self):
        self.clear()

    @property
    def ready(self) -> bool:
        return len(self._entries) >= self.n_steps

    def __len__(self):
        return len(self._entries)

    def __getitem__(self, item) -> BackupEntry:
        return self._entries[item]

    def propagate(self, gamma: float) -> Tuple[float, float]:
        """
        Fold the first n_steps entries into (importance sampling ratio, n-step return) for the oldest entry.

        The return starts from the oldest entry's Q and accumulates each residual weighted by the product of
            gamma * ((1 - sigma_k) * pi_{k+1} + sigma_{k+1}). The ratio multiplies 1 - sigma_k + sigma_k * pi_k / mu_k.
            A zero behaviour probability yields inf / nan rather than an error.
        """
        entries = self._entries
        if not entries:
            raise IndexError('Cannot propagate an empty backup queue.')
        g = entries[0].q
        z = 1.0
        isr = 1.0
        with np.errstate(divide='ignore', invalid='ignore'):
            for k in range(min(self.n_steps, len(entries))):
                b1 = entries[k]
                g += z * b1.residual
                if k + 1 < len(entries):
                    b2 = entries[k + 1]
                    z *= gamma * ((1.0 - b1.sigma) * b2.pi + b2.sigma)
                if not b1.terminal:
                    isr *= 1.0 - b1.sigma + b1.sigma * np.float64(b1.pi) / np.float64(b1.mu)
        return isr, g
