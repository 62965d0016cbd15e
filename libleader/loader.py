from importlib import import_module
from typing import Iterable
import logging

from .commands import modules

module_logger = logging.getLogger('libleader.loader')

class ModLoader():
    def __init__(self, cord):
        self.cord = cord

    def load_all(self, names: Iterable[str] = None):
        names = list(names) if names else modules
        module_logger.info(f"loading {len(names)} command modules")
        for mod in names:
            self.load(mod)

    def load(self, module: str):
        if module not in modules:
            raise ValueError(f"unknown command module '{module}', expected one of {modules}")
        module_logger.debug(f"load('{module}')")
        _basename = 'libleader.commands.{}'.format(module)
        mod = import_module(_basename)
        mod.init(self.cord)
        module_logger.info(f"loaded {module}")

