from ml_collections import config_dict
from dnagraph.models import AVAILABLE_CODECS


def get_config():
    config = config_dict.ConfigDict()
    config.mode = 'report'
    config.codecs = [name for name in AVAILABLE_CODECS if name != 'natural']
    config.max_num_nodes = 100
    config.output_dir = 'benchmark'
    config.seed = 2
    return config
