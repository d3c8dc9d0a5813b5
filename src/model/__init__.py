# __init__.py
"""
Model module.

Used by controllers to keep track of learning state not permanently stored by the environment:
    eligibility traces and queues of pending n-step backups.
"""

from .base import ElementModel
from .EligibilityTrace import EligibilityTrace, AccumulatingTrace, ReplacingTrace, DutchTrace, TRACES, make_trace
from .BackupModel import BackupEntry, BackupQueue
