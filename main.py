#!/usr/bin/env python3

# usage: python main.py [config_file] [--section.key value ...]
# example: python main.py configs/day1/baseline.yaml --data.input_path 1.txt
# reads the two-column input file from current directory and prints
# total distance followed by similarity score

import os
import sys

from locpairs.config import Config
from locpairs.solve import main

if __name__ == "__main__":
    default_config = os.path.join(os.path.dirname(os.path.abspath(__file__)),
                                  'configs', 'day1', 'baseline.yaml')
    config = Config(default_config_filepath=default_config,
                    app_desc='Total distance and similarity score of two integer columns')
    sys.exit(main(config))
