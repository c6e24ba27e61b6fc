from ml_collections import config_flags
from ml_collections import config_dict
from dnagraph.models import load_codec
from dnagraph.datasets import load_dataset
from dnagraph.benchmark import check_isomorphism_preservation, survives_round_trip, write_report
from absl import app
from absl import flags

import numpy as np

_CONFIG = config_flags.DEFINE_config_file("config")
flags.DEFINE_bool("show_sequences", False, "Print the DNA sequences of the dataset graph.")
_FLAGS = flags.FLAGS


def main(_):
    print(f"Running experiment with config: \n{_CONFIG.value}")

    # You can log the results to your favorite experiment tracking tool here.
    if _CONFIG.value.mode == 'roundtrip':
        results = run_roundtrip_experiment(_CONFIG.value)
    elif _CONFIG.value.mode == 'report':
        results = run_report_experiment(_CONFIG.value)
    else:
        raise ValueError(f"Unknown mode {_CONFIG.value.mode}.")
    return results


def run_roundtrip_experiment(config: config_dict.ConfigDict):
    rng = np.random.default_rng(config.seed)
    graph = load_dataset(config.dataset_name) if config.dataset_name else None

    results = {}
    for codec_name in config.codecs:
        codec = load_codec(codec_name)

        if graph is not None:
            preserved = codec.serialize(graph, True)
            discarded = codec.serialize(graph, False)
            if _FLAGS.show_sequences:
                print(f"{codec_name} preserve order: {preserved}")
                print(f"{codec_name} discard order:  {discarded}")
            print(f"{config.dataset_name} {codec_name} lengths: {len(preserved)} / {len(discarded)}")
            print(f"{config.dataset_name} {codec_name} round trip correct: {survives_round_trip(codec, graph)}")

        print(f"Checking {codec_name} on random graphs")
        preserved_isomorphism = check_isomorphism_preservation(
            codec,
            max_num_nodes=config.max_num_nodes,
            graphs_per_size=config.graphs_per_size,
            rng=rng,
        )
        print(f"{codec_name} preserves isomorphism: {preserved_isomorphism}")
        results[codec_name] = preserved_isomorphism

    return results


def run_report_experiment(config: config_dict.ConfigDict):
    rng = np.random.default_rng(config.seed)
    codecs = {name: load_codec(name) for name in config.codecs}

    path = write_report(codecs, config.max_num_nodes, rng=rng, output_dir=config.output_dir)
    print(f"Report written to {path}")
    return {"path": path}


if __name__ == "__main__":
    app.run(main)
