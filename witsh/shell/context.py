"""
Shell Context Module

Interpreter-owned mutable state shared by resolution and built-ins.

Author: YSNRFD
Version: 1.0.0
"""

from dataclasses import dataclass, field
from typing import Optional

from witsh.core.config_loader import ShellConfig, get_config
from .search_path import SearchPath


@dataclass
class ShellContext:
    """
    State owned by the controlling interpreter process.

    Only built-ins, which run synchronously in the controller, mutate
    it. Children inherit the working directory at fork time but never
    see the search list.
    """
    config: ShellConfig = field(default_factory=lambda: get_config().shell)
    search_path: Optional[SearchPath] = None

    def __post_init__(self):
        if self.search_path is None:
            self.search_path = SearchPath(self.config.default_path)
