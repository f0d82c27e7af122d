import logging


class TermColors:
    """ANSI escape codes for colouring ring output on a terminal."""
    RESET = '\033[0m'
    BOLD = '\033[1m'
    DIM = '\033[2m'

    RED = '\033[31m'
    GREEN = '\033[32m'
    YELLOW = '\033[33m'
    CYAN = '\033[36m'
    LIGHT_MAGENTA = '\033[95m'
    GRAY = '\033[90m'

    @staticmethod
    def colorize(text, color, bold=False, dim=False):
        """Applies color and style to a string."""
        style = ''
        if bold: style += TermColors.BOLD
        if dim: style += TermColors.DIM
        return f"{style}{color}{text}{TermColors.RESET}"

# Create a global instance for easy importing and use
TC = TermColors()


class ColorFormatter(logging.Formatter):
    """Colours each formatted log record according to its level."""

    LEVEL_COLORS = {
        logging.DEBUG: TC.GRAY,
        logging.INFO: TC.GREEN,
        logging.WARNING: TC.YELLOW,
        logging.ERROR: TC.RED,
        logging.CRITICAL: TC.RED,
    }

    def format(self, record):
        message = super().format(record)
        color = self.LEVEL_COLORS.get(record.levelno)
        if color is None:
            return message
        return TC.colorize(message, color, bold=record.levelno >= logging.CRITICAL)


def configure_logging(level="INFO", stream=None):
    """Installs a coloured stream handler on the root logger and returns it."""
    handler = logging.StreamHandler(stream)
    handler.setFormatter(ColorFormatter("%(levelname)s %(name)s: %(message)s"))
    root = logging.getLogger()
    root.addHandler(handler)
    root.setLevel(level)
    return handler
