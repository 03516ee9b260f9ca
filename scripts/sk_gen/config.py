"""
Generator configuration

The scripts path depth can be read from the project ini file, where each
script overlay is declared as

    Overlay<N>=[-]<name>|<path>|<depth>
"""

from dataclasses import dataclass
from pathlib import Path
import re
from typing import Optional

from .errors import InvalidConfiguration
from .log import get_logger
from .writer import DEFAULT_TEMP_SUFFIX

logger = get_logger('config')

# Super classes nested as directories before flattening kicks in
DEFAULT_SCRIPTS_PATH_DEPTH = 4


def read_scripts_path_depth(ini_path, overlay_name: str) -> Optional[int]:
    """Find the path depth of an overlay in a project ini file

    Returns None if the file, the overlay or a positive depth is missing.
    """
    try:
        text = Path(ini_path).read_text(encoding='utf-8', errors='replace')
    except OSError:
        return None

    pattern = re.compile(r'Overlay[0-9]+=-?' + re.escape(overlay_name) + r'\|.*?\|([0-9]+)')
    match = pattern.search(text)
    if match is None:
        return None
    depth = int(match.group(1))
    return depth if depth > 0 else None


@dataclass
class GeneratorConfig:
    """Settings of a generation run"""
    scripts_path: Path
    path_depth: int = DEFAULT_SCRIPTS_PATH_DEPTH
    temp_suffix: str = DEFAULT_TEMP_SUFFIX
    encoding: str = 'utf-8'

    def __post_init__(self):
        self.scripts_path = Path(self.scripts_path)

    def validate(self):
        if self.path_depth < 1:
            raise InvalidConfiguration(f'scripts path depth must be at least 1, got {self.path_depth}')
        if not self.temp_suffix:
            raise InvalidConfiguration('temp file suffix must not be empty')

    @classmethod
    def from_project_ini(cls, scripts_path, ini_path, overlay_name: str, **kwargs) -> 'GeneratorConfig':
        """Create a config taking the path depth from the project ini file"""
        depth = read_scripts_path_depth(ini_path, overlay_name)
        if depth is None:
            logger.warning('no path depth for overlay %r in %s, using %d',
                           overlay_name, ini_path, DEFAULT_SCRIPTS_PATH_DEPTH)
            depth = DEFAULT_SCRIPTS_PATH_DEPTH
        return cls(scripts_path=scripts_path, path_depth=depth, **kwargs)
