import schrodinger.settings
from schrodinger.settings import settings
import schrodinger.version
from schrodinger.version import version as __version__

# -----------------------------------------------------------------------------
# Load modules
#

from .core import *
from .core import data
