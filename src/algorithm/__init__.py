# __init__.py
"""
Algorithm module.

Contains Reinforcement Learning Algorithms,
	which consume transitions and update the value functions they own.

	Controllers learn action values and carry a behaviour and a target policy.
	Predictors learn the state values of whichever policy generated their transitions.
	Some algorithms keep a Model (eligibility trace, backup queue) between transitions.
"""
from .base import Algorithm, Controller, Predictor
from .TemporalDifference import TemporalDifference
from .SARSA import SARSA
from .QLearning import QLearning
from .ExpectedSARSA import ExpectedSARSA
from .PAL import PAL
from .QSigma import QSigma
from .GreedyGQ import GreedyGQ
from .SARSALambda import SARSALambda
from .QLambda import QLambda
from .TOSARSALambda import TOSARSALambda
from .LSTD import LSTD
from .TOQLambda import TOQLambda
from .TDLambda import TDLambda
from .GradientTD import GradientTD
from .GTD2 import GTD2
from .TDC import TDC
from .LambdaLSPE import LambdaLSPE
