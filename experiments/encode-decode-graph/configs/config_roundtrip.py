from ml_collections import config_dict
from dnagraph.models import AVAILABLE_CODECS


def get_config():
    config = config_dict.ConfigDict()
    config.mode = 'roundtrip'
    config.codecs = [name for name in AVAILABLE_CODECS if name != 'natural']
    config.dataset_name = config_dict.placeholder(str)
    config.max_num_nodes = 10
    config.graphs_per_size = 10
    config.seed = 0
    return config
