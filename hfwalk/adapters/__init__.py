from . import bse_file
from . import bse
from .bse_file import file_fetcher, load_file
