#!/bin/python3
# -*- coding: utf-8 -*-

import logging
import sys

from libleader import LibLeader
from libleader.config import load_config

config = load_config(sys.argv[1] if len(sys.argv) > 1 else 'config.yaml')
log_level = config.pop('log_level')

root = logging.getLogger()
root.setLevel(log_level)
if log_level == 'DEBUG':
    logging.getLogger('libleader').setLevel(logging.DEBUG)

ch = logging.StreamHandler(sys.stdout)
ch.setLevel(logging.DEBUG)
formatter = logging.Formatter('[%(asctime)s | %(name)s | %(levelname)s] %(message)s')
ch.setFormatter(formatter)
root.addHandler(ch)

cord: LibLeader = LibLeader(**config)

try:
    cord.start()
except KeyboardInterrupt:
    logging.getLogger('libleader').info("stopped")
