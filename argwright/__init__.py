__path__ = __import__("pkgutil").extend_path(__path__, __name__)  # NOQA: F-821
__title__ = 'argwright'
__author__ = 'Argwright contributors'
__license__ = 'MIT'
# Placeholder, modified by dynamic-versioning.
__version__ = "0.0.0"

from .assembler import *
from .casing import *
from .directives import *
from .docs import *
from .expressions import *
from .faults import *
from .kinds import *
from .metadata import *
from .model import *
from .parsers import *
from .shapes import *

VersionInfo = __import__("collections").namedtuple("VersionInfo", (
    "major",
    "minor",
    "micro",
    "releaselevel",
    "serial",
    "metadata"
))

# Placeholder, modified by dynamic-versioning.
version_info = VersionInfo(0, 0, 0, "final", 0, "")

__all__ = (
    "__path__",
    "__title__",
    "__author__",
    "__license__",
    "__version__",
    "version_info"
)

# Load the exposed API of every public module
__all__ += assembler.__all__  # type: ignore[attr-defined]
__all__ += casing.__all__  # type: ignore[attr-defined]
__all__ += directives.__all__  # type: ignore[attr-defined]
__all__ += docs.__all__  # type: ignore[attr-defined]
__all__ += expressions.__all__  # type: ignore[attr-defined]
__all__ += faults.__all__  # type: ignore[attr-defined]
__all__ += kinds.__all__  # type: ignore[attr-defined]
__all__ += metadata.__all__  # type: ignore[attr-defined]
__all__ += model.__all__  # type: ignore[attr-defined]
__all__ += parsers.__all__  # type: ignore[attr-defined]
__all__ += shapes.__all__  # type: ignore[attr-defined]
