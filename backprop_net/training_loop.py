import logging
import os
import random
from typing import List, Optional

import pandas as pd

from .config import Config
from .data import Example2D, classify_two_gauss_data, construct_input
from .network import (
    Activation,
    ErrorFunction,
    Network,
    Regularization,
    back_prop,
    build_network,
    forward_prop,
    update_weights,
)

LOGGER_NAME = "BackpropNet"
STATS_HEADERS = ["iteration", "loss_train", "loss_test", "dead_links"]

# -------------------------------
# Logging helpers
# -------------------------------
def setup_logging(log_file: Optional[str] = None) -> logging.Logger:
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.DEBUG)

    # Calling twice must not duplicate output
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    fmt = logging.Formatter("[%(asctime)s][%(levelname)s] %(message)s")

    ch = logging.StreamHandler()
    ch.setLevel(logging.INFO)
    ch.setFormatter(fmt)
    logger.addHandler(ch)

    if log_file:
        log_dir = os.path.dirname(log_file)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
        fh = logging.FileHandler(log_file)
        fh.setLevel(logging.DEBUG)
        fh.setFormatter(fmt)
        logger.addHandler(fh)

    return logger


def get_loss(network: Network, data_points: List[Example2D], error_func: ErrorFunction) -> float:
    """Mean error of the network over the data points, forward pass only."""
    if not data_points:
        raise ValueError("Cannot compute the loss of an empty dataset")
    loss = 0.0
    for point in data_points:
        output = forward_prop(network, construct_input(point))
        loss += error_func.error(output, point.label)
    return loss / len(data_points)


class TrainingLoop:
    def __init__(self, config: Config) -> None:
        self.config = config
        self.batch_size = config.batch_size
        self.learning_rate = config.learning_rate
        self.regularization_rate = getattr(config, "regularization_rate", 0.0)
        self.error_func = ErrorFunction.from_name(getattr(config, "error", "square"))
        self.log_path = getattr(config, "log_path", None)
        self.stats_path = getattr(config, "stats_path", None)

        self.network: Optional[Network] = None
        self.train_data: List[Example2D] = []
        self.test_data: List[Example2D] = []
        self.loss_train = 0.0
        self.loss_test = 0.0
        self.iteration = 0
        self.history: List[dict] = []

        self.logger = logging.getLogger(LOGGER_NAME)

    def build(self) -> Network:
        config = self.config
        rng = random.Random(getattr(config, "seed", None))

        regularization = getattr(config, "regularization", None)
        self.network = build_network(
            config.network_shape,
            Activation.from_name(config.activation),
            Activation.from_name(config.output_activation),
            Regularization.from_name(regularization) if regularization else None,
            config.input_ids,
            init_zero=getattr(config, "init_zero", False),
            rng=rng,
        )
        noise = getattr(config, "noise", 0.0)
        self.train_data = classify_two_gauss_data(config.num_train_samples, noise, rng)
        self.test_data = classify_two_gauss_data(config.num_test_samples, noise, rng)

        self.iteration = 0
        self.history = []
        self.logger.info(
            f"Built {self.network!r} | train={len(self.train_data)} test={len(self.test_data)}"
        )
        return self.network

    def one_step(self) -> None:
        """One pass over the training data followed by a loss evaluation."""
        for i, point in enumerate(self.train_data):
            forward_prop(self.network, construct_input(point))
            back_prop(self.network, point.label, self.error_func)
            if (i + 1) % self.batch_size == 0:
                update_weights(self.network, self.learning_rate, self.regularization_rate)

        self.iteration += 1
        self.compute_losses()

    def compute_losses(self) -> None:
        self.loss_train = get_loss(self.network, self.train_data, self.error_func)
        self.loss_test = get_loss(self.network, self.test_data, self.error_func)
        self.log_stats()

    def run(self, iterations: Optional[int] = None) -> pd.DataFrame:
        """
        Train for `iterations` steps (config.iterations by default). A later
        call keeps training the same network, but the returned history and
        the stats file only cover that call.
        """
        if self.log_path:
            setup_logging(self.log_path)
        if self.network is None:
            self.build()
        self.iteration = 0
        self.history = []

        if self.stats_path:
            stats_dir = os.path.dirname(self.stats_path)
            if stats_dir:
                os.makedirs(stats_dir, exist_ok=True)
            pd.DataFrame(columns=STATS_HEADERS).to_csv(self.stats_path, index=False)

        iterations = self.config.iterations if iterations is None else iterations
        self.logger.info("Starting training loop")
        self.compute_losses()
        for _ in range(iterations):
            self.one_step()
        self.logger.info(
            f"Training loop complete | loss_train={self.loss_train:.6f}, loss_test={self.loss_test:.6f}"
        )
        return pd.DataFrame(self.history, columns=STATS_HEADERS)

    def log_stats(self) -> None:
        row = {
            "iteration": self.iteration,
            "loss_train": self.loss_train,
            "loss_test": self.loss_test,
            "dead_links": self.network.num_dead_links(),
        }
        self.history.append(row)
        self.logger.info(
            f"Iteration {self.iteration}: loss_test={self.loss_test:.6f}, loss_train={self.loss_train:.6f}"
        )
        if self.stats_path and os.path.exists(self.stats_path):
            df = pd.DataFrame({k: [v] for k, v in row.items()}, columns=STATS_HEADERS)
            df.to_csv(self.stats_path, mode="a", header=False, index=False)
