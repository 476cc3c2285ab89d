from .options import *
from .errors import *
from .dimensions import *
from .qobj import *
from .functions import *
from .tensor import *
from .operators import *
from .states import *
