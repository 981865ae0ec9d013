"""Built-in cohesion metrics."""

from .camc import CAMC
from .lcom import LCOM
from .lcom2 import LCOM2
from .lcom3 import LCOM3
from .nhd import NHD
from .occ import OCC

__all__ = ["CAMC", "LCOM", "LCOM2", "LCOM3", "NHD", "OCC"]
