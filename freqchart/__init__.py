from .index import FrequencyIndex, RankedToken, TopKResult
from .utils import TokenMode

__version__ = "0.1.0"
