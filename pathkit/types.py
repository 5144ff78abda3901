"""Custom types."""
from typing import Union, Optional
import os

PathLike = Union[str, 'os.PathLike[str]']
OptPathLike = Optional[PathLike]
