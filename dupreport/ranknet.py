"""Pairwise RankNet learning of similarity-model parameters over report buckets."""

from __future__ import annotations

import logging
import math
import random
from abc import ABC, abstractmethod
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import Protocol

from .reports import AbstractBugReport, MasterBugReport

_log = logging.getLogger(__name__)


class _BucketSource(Protocol):
    """Anything that lists the master report of every bucket."""

    def all_bucket_masters(self) -> Sequence[MasterBugReport]:
        ...


@dataclass(frozen=True)
class RankNetTrainingInstance:
    """A query with one report that should rank high and one that should not."""

    query: AbstractBugReport
    relevant_report: AbstractBugReport
    irrelevant_report: AbstractBugReport


def _sigmoid(x: float) -> float:
    if x >= 0:
        return 1.0 / (1.0 + math.exp(-x))
    e = math.exp(x)
    return e / (1.0 + e)


def _softplus(x: float) -> float:
    return max(x, 0.0) + math.log1p(math.exp(-abs(x)))


class AbstractRankNetLearner(ABC):
    """Gradient descent on the RankNet cost ``log(1 + exp(Y))``.

    ``Y`` is the similarity of the irrelevant report minus that of the relevant
    one. Subclasses define the similarity and how one pair tunes the parameters.
    """

    MAX_EPOCHS = 24
    INITIAL_LEARNING_RATE = 0.001
    TRAINING_RATIO = 1.0

    def __init__(
        self,
        buckets: _BucketSource,
        irrelevant_per_query: int,
        max_query_count: int,
        log: logging.Logger | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self.buckets = buckets
        self.irrelevant_per_query = irrelevant_per_query
        self.max_query_count = max_query_count
        self.log = log if log is not None else _log
        self.rng = rng if rng is not None else random.Random()
        self.best_rnc_so_far = -99999.0
        self._training_pairs: list[RankNetTrainingInstance] = []
        self._validating_pairs: list[RankNetTrainingInstance] = []

    @property
    def training_pairs(self) -> tuple[RankNetTrainingInstance, ...]:
        return tuple(self._training_pairs)

    @property
    def validating_pairs(self) -> tuple[RankNetTrainingInstance, ...]:
        return tuple(self._validating_pairs)

    def random_masters(
        self,
        masters: Sequence[MasterBugReport],
        count: int,
        excluding_master_id: int,
    ) -> list[MasterBugReport]:
        """Pick ``count`` distinct masters other than the excluded one.

        As in the sampling this follows, the last master of the list is never
        picked. Raises ValueError when too few candidates exist.
        """
        if count <= 0:
            raise ValueError(f"count must be positive: {count}")
        span = len(masters) - 1
        candidates = {m.id for m in masters[:max(span, 0)]} - {excluding_master_id}
        if len(candidates) < count:
            raise ValueError(
                f"only {len(candidates)} masters available, {count} requested"
            )
        excluded = {excluding_master_id}
        result: list[MasterBugReport] = []
        while len(result) < count:
            master = masters[int(span * self.rng.random())]
            while master.id in excluded:
                master = masters[int(span * self.rng.random())]
            excluded.add(master.id)
            result.append(master)
        return result

    def _pairs_for(
        self,
        bucket_id: int,
        masters: Sequence[MasterBugReport],
        query: AbstractBugReport,
        relevant: AbstractBugReport,
    ) -> Iterable[RankNetTrainingInstance]:
        for irrelevant in self.random_masters(
            masters, self.irrelevant_per_query, bucket_id
        ):
            yield RankNetTrainingInstance(query, relevant, irrelevant)

    def build_training_pairs(self) -> None:
        """Build pairs from every ordered pair of reports sharing a bucket."""
        self.log.info("RankNet: building training pairs...")
        masters = list(self.buckets.all_bucket_masters())
        self.log.info("RankNet: master report count = %d", len(masters))
        self._training_pairs = []

        query_size = 0
        for master in masters:
            if not master.has_duplicates():
                continue
            query_size += 1
            if query_size >= self.max_query_count:
                break
            bucket = master.whole_bucket()
            for query_index, query in enumerate(bucket):
                for relevant in bucket[:query_index]:
                    self._training_pairs.extend(
                        self._pairs_for(master.id, masters, query, relevant)
                    )
                    self._training_pairs.extend(
                        self._pairs_for(master.id, masters, relevant, query)
                    )

        total = len(self._training_pairs)
        validation_size = int(total * (1 - self.TRAINING_RATIO))
        split = total - validation_size
        self._validating_pairs.extend(self._training_pairs[split:])
        del self._training_pairs[split:]

        self.log.info("RankNet: built %d training pairs.", len(self._training_pairs))
        self.log.info(
            "RankNet: built %d validating pairs.", len(self._validating_pairs)
        )

    def similarity_difference(self, pair: RankNetTrainingInstance) -> float:
        """Similarity to the irrelevant report minus similarity to the relevant one."""
        relevant = self.compute_similarity(pair.query, pair.relevant_report)
        irrelevant = self.compute_similarity(pair.query, pair.irrelevant_report)
        if math.isnan(relevant) or math.isnan(irrelevant):
            raise ValueError("similarity is NaN")
        return irrelevant - relevant

    def rnc_derivative(self, pair: RankNetTrainingInstance) -> float:
        """``exp(Y) / (1 + exp(Y))``, the cost's derivative with respect to Y."""
        return _sigmoid(self.similarity_difference(pair))

    def total_rnc_cost(self, pairs: Iterable[RankNetTrainingInstance]) -> float:
        """The sum of ``log(1 + exp(Y))`` over the pairs."""
        return sum(_softplus(self.similarity_difference(pair)) for pair in pairs)

    def learn(self) -> None:
        """Build pairs and run every training round, then finish learning."""
        self.best_rnc_so_far = 999999.0
        self._training_pairs = []
        self._validating_pairs = []
        self.build_training_pairs()

        for round_number in range(1, self.training_round_count() + 1):
            self.initialize_model_parameters(round_number)
            learning_rate = self.INITIAL_LEARNING_RATE
            previous_cost = 99999999.0

            for _ in range(self.MAX_EPOCHS):
                for pair in self._training_pairs:
                    self.before_tune()
                    self.tune_on_pair(pair, learning_rate)
                    self.after_tune()

                cost = self.total_rnc_cost(self._training_pairs)
                if cost > previous_cost:
                    learning_rate /= 2
                previous_cost = cost

                if self._validating_pairs:
                    validation = self.total_rnc_cost(self._validating_pairs)
                    if validation < self.best_rnc_so_far:
                        self.best_rnc_so_far = validation
                        self.found_better_model()
                else:
                    self.found_better_model()

        self.learning_done()

    @abstractmethod
    def compute_similarity(
        self, query_report: AbstractBugReport, base_report: AbstractBugReport
    ) -> float:
        """The model's similarity of a base report to a query."""

    @abstractmethod
    def initialize_model_parameters(self, round_number: int) -> None:
        """Set the parameters at the start of a training round (from 1)."""

    @abstractmethod
    def before_tune(self) -> None:
        """Prepare a working copy of the parameters before tuning on a pair."""

    @abstractmethod
    def after_tune(self) -> None:
        """Adopt the working copy after tuning on a pair."""

    @abstractmethod
    def tune_on_pair(
        self, pair: RankNetTrainingInstance, learning_rate: float
    ) -> None:
        """Take one gradient step on a training pair."""

    @abstractmethod
    def learning_done(self) -> None:
        """Settle on the best parameters found."""

    @abstractmethod
    def training_round_count(self) -> int:
        """How many training rounds to run."""

    @abstractmethod
    def found_better_model(self) -> None:
        """Remember the current parameters as the best so far."""