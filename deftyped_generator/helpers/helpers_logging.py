"""Simple logging helpers for the deftyped CLI."""


class Colors:
    """ANSI color codes for terminal output."""
    OKCYAN = '\033[96m'
    BLUE = '\033[94m'
    OKGREEN = '\033[92m'
    YELLOW = '\033[93m'
    RED = '\033[91m'
    WHITE = '\033[97m'
    ENDC = '\033[0m'
    BOLD = '\033[1m'


BANNER_LINES = (
    r"   ___ _____                  _ ",
    r"  |   \_   _|  _ _ __  ___ __| |",
    r"  | |) || || || | '_ \/ -_) _` |",
    r"  |___/ |_| \_, | .__/\___\__,_|",
    r"            |__/|_|             ",
)


def print_banner() -> None:
    """Print the DTyped greeting banner and welcome line."""
    for line in BANNER_LINES:
        print(f"{Colors.BOLD}{Colors.BLUE}{line}{Colors.ENDC}")
    print(f"{Colors.WHITE} Welcome to DefinitelyTyped typing boilerplate!{Colors.ENDC}\n")


def print_info(msg: str) -> None:
    """Print an info message."""
    print(f"{Colors.OKCYAN}{msg}{Colors.ENDC}")


def print_success(msg: str) -> None:
    """Print a success message."""
    print(f"{Colors.OKGREEN}✓ {msg}{Colors.ENDC}")


def print_warning(msg: str) -> None:
    """Print a warning message."""
    print(f"{Colors.YELLOW}⚠️  {msg}{Colors.ENDC}")


def print_error(msg: str) -> None:
    """Print an error message."""
    print(f"{Colors.RED}❌ {msg}{Colors.ENDC}")
