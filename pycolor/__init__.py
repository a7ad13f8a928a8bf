# flake8: noqa
from ._logging import LogLevel, logger
from ._metadata import version
from .arithmetic import *
from .color import *
from .convert import *
from .exception import *
