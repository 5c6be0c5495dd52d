"""
Data type enum type.
Data types include weights, inputs and outputs.
"""
WEIGHT = 0
INPUT = 1
OUTPUT = 2
NUM = 3

table = {0: 'weights',
         1: 'inputs',
         2: 'outputs'}
