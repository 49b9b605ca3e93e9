from . import ui as ui
from ._application import Application as Application
from ._application import Command as Command
from ._application import CommandNotFoundError as CommandNotFoundError
from ._args import ArgvArgs as ArgvArgs
from ._args import RawArgs as RawArgs
from ._args import StringArgs as StringArgs
from ._args import find_similar_names as find_similar_names
from ._dimensions import Rectangle as Rectangle
from ._dimensions import get_terminal_dimensions as get_terminal_dimensions
from ._formatter import AnsiFormatter as AnsiFormatter
from ._formatter import Formatter as Formatter
from ._formatter import NullFormatter as NullFormatter
from ._formatter import PlainFormatter as PlainFormatter
from ._formatter import display_width as display_width
from ._io import IO as IO
from ._io import BufferedIO as BufferedIO
from ._io import ConsoleIO as ConsoleIO
from ._io import Input as Input
from ._io import Output as Output
from ._io import Verbosity as Verbosity
from ._process import ProcessLauncher as ProcessLauncher
from ._settings import options as options
from ._streams import BufferedOutputStream as BufferedOutputStream
from ._streams import ErrorOutputStream as ErrorOutputStream
from ._streams import InputStream as InputStream
from ._streams import IOFailure as IOFailure
from ._streams import NullInputStream as NullInputStream
from ._streams import NullOutputStream as NullOutputStream
from ._streams import OutputStream as OutputStream
from ._streams import StandardInputStream as StandardInputStream
from ._streams import StandardOutputStream as StandardOutputStream
from ._streams import StreamInputStream as StreamInputStream
from ._streams import StreamOutputStream as StreamOutputStream
from ._streams import StringInputStream as StringInputStream
from ._strings import InvalidValueError as InvalidValueError
from ._style import DefaultStyleSet as DefaultStyleSet
from ._style import Style as Style
from ._style import StyleSet as StyleSet
from ._style import UnknownStyleError as UnknownStyleError

__version__ = "0.1.0"
