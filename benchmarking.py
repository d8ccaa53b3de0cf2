import logging
import time
from typing import Any, Callable, Dict, List, Optional

import networkx as nx
import numpy as np
import pandas as pd
from tqdm import tqdm

from graph_generators.planted_cut import to_records
from wirecut.errors import ReductionBudgetExhausted
from wirecut.solver import find_partition
from wirecut.wires import Wires

logger = logging.getLogger(__name__)


class BenchmarkRunner:
    """
    Runs the partitioner over planted-cut graphs of increasing size.
    """

    def __init__(self,
                 generators: Dict[str, Callable],
                 seed: Optional[int] = None,
                 verify: bool = False):
        """
        Args:
            generators (Dict[str, Callable]):
                Dict of {'model_name': generator_function}
                Each function must accept left, right, seed and **kwargs and
                return an nx.Graph with `sizes` set in its graph attributes.

            seed (Optional[int]):
                Base seed for graphs and the partitioner.
                If None, randomness is uncontrolled.

            verify (bool):
                Cross-check every cut value with networkx's Stoer-Wagner.
                Slow for large graphs.
        """
        self.generators = generators
        self.base_seed = seed
        self.verify = verify

    def _seed(self, model_name: str, n: int, i: int) -> Optional[int]:
        if self.base_seed is None:
            return None
        return self.base_seed + sum(map(ord, model_name)) * 100003 + n * 1009 + i

    def run(self,
            models: List[str],
            n_values: List[int],
            trials: int,
            model_params: Dict[str, Dict[str, Any]],
            width: int = 3) -> pd.DataFrame:
        """
        Runs the full benchmark.

        Args:
            models (List[str]): List of model names (e.g., ['RR', 'BA']).
            n_values (List[int]): Total component counts, split evenly.
            trials (int): Number of trials for each (model, n) pair.
            model_params (Dict): Parameters for each model generator.
                                 e.g., {'RR': {'degree': 6}, 'BA': {'m': 4}}
            width (int): Planted cut width.

        Returns:
            pd.DataFrame: one row per trial.
        """
        rows = []

        for model_name in models:
            if model_name not in self.generators:
                logger.warning("Generator '%s' not found. Skipping.", model_name)
                continue
            gen_func = self.generators[model_name]
            params = model_params.get(model_name, {})

            for n in n_values:
                left = n // 2
                right = n - left
                for i in tqdm(range(trials), desc=f"{model_name} n={n}"):
                    seed = self._seed(model_name, n, i)
                    G = gen_func(left=left, right=right, width=width, seed=seed, **params)
                    wires = Wires.from_adjacency(to_records(G))

                    rng = np.random.default_rng(seed)
                    start_time = time.perf_counter()
                    try:
                        partition = find_partition(wires, rng, target=width)
                    except ReductionBudgetExhausted as e:
                        logger.warning("%s n=%d trial %d: %s", model_name, n, i, e)
                        partition = None
                    end_time = time.perf_counter()

                    row = {
                        'model': model_name,
                        'n': n,
                        'edges': wires.edge_count(),
                        'trial': i,
                        'time_s': end_time - start_time,
                        'attempts': partition.attempts if partition else np.nan,
                        'product': partition.product if partition else np.nan,
                        'correct': partition is not None and partition.product == left * right,
                    }
                    if self.verify:
                        cut_value, _ = nx.stoer_wagner(G)
                        row['true_cut'] = cut_value
                    rows.append(row)

        logger.info("Benchmark complete: %d runs", len(rows))
        return pd.DataFrame(rows)


def summarise(results: pd.DataFrame) -> pd.DataFrame:
    """Per (model, n) timing and success statistics."""
    return (results
            .groupby(['model', 'n'], as_index=False)
            .agg(trials=('trial', 'count'),
                 edges=('edges', 'mean'),
                 mean_time_s=('time_s', 'mean'),
                 std_time_s=('time_s', 'std'),
                 mean_attempts=('attempts', 'mean'),
                 success_rate=('correct', 'mean')))
