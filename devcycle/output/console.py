from rich.console import Console

# stdout belongs to the wrapped tools
CONSOLE = Console(stderr=True, highlight=False, soft_wrap=True)
