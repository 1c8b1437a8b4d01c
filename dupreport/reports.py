"""Bug reports: masters, their duplicates, and per-report similarity scratch data."""

from __future__ import annotations

import copy as _copy
from abc import ABC, abstractmethod
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import Any

from .sections import Section, SectionType, StructuredSection
from .terms import Term


@dataclass
class SimilarityInfo:
    """The best similarity found for a report and the id of the report it came from."""

    similarity: float = 0.0
    similar_report_id: int = 0

    def reset(self) -> None:
        self.similarity = 0.0
        self.similar_report_id = 0

    def set_similarity(self, similarity: float, similar_report_id: int) -> None:
        self.similarity = similarity
        self.similar_report_id = similar_report_id


class AbstractBugReport(ABC):
    """A bug report with its n-gram sections and categorical fields.

    A report whose ``duplicate_id`` equals its ``id`` is a master; otherwise it
    duplicates the master with id ``duplicate_id``.
    """

    def __init__(
        self,
        report_id: int,
        duplicate_id: int,
        *,
        summary_unigrams: Iterable[Term] = (),
        summary_bigrams: Iterable[Term] = (),
        summary_trigrams: Iterable[Term] = (),
        description_unigrams: Iterable[Term] = (),
        description_bigrams: Iterable[Term] = (),
        description_trigrams: Iterable[Term] = (),
        all_unigrams: Iterable[Term] = (),
        all_bigrams: Iterable[Term] = (),
        all_trigrams: Iterable[Term] = (),
        version: int = 0,
        component: int = 0,
        sub_component: int = 0,
        report_type: int = 0,
        priority: int = 0,
        timestamp_in_days: int = 0,
    ) -> None:
        self.id = report_id
        self.duplicate_id = duplicate_id
        self.similarity_info = SimilarityInfo()
        self._sections: dict[SectionType, Section] = {
            SectionType.SUM_UNI: Section(tuple(summary_unigrams)),
            SectionType.SUM_BI: Section(tuple(summary_bigrams)),
            SectionType.SUM_TRI: Section(tuple(summary_trigrams)),
            SectionType.DESC_UNI: Section(tuple(description_unigrams)),
            SectionType.DESC_BI: Section(tuple(description_bigrams)),
            SectionType.DESC_TRI: Section(tuple(description_trigrams)),
            SectionType.ALL_UNI: Section(tuple(all_unigrams)),
            SectionType.ALL_BI: Section(tuple(all_bigrams)),
            SectionType.ALL_TRI: Section(tuple(all_trigrams)),
        }
        self.structured_unigrams = StructuredSection(
            self._sections[SectionType.SUM_UNI], self._sections[SectionType.DESC_UNI]
        )
        self.structured_bigrams = StructuredSection(
            self._sections[SectionType.SUM_BI], self._sections[SectionType.DESC_BI]
        )
        self.version = version
        self.component = component
        self.sub_component = sub_component
        self.report_type = report_type
        self.priority = priority
        self.timestamp_in_days = timestamp_in_days

    def section(self, section_type: SectionType | int) -> Section:
        """The section of the given type; raises ValueError for an unknown type."""
        return self._sections[SectionType(section_type)]

    @property
    def summary_unigrams(self) -> Section:
        return self._sections[SectionType.SUM_UNI]

    @property
    def summary_bigrams(self) -> Section:
        return self._sections[SectionType.SUM_BI]

    @property
    def summary_trigrams(self) -> Section:
        return self._sections[SectionType.SUM_TRI]

    @property
    def description_unigrams(self) -> Section:
        return self._sections[SectionType.DESC_UNI]

    @property
    def description_bigrams(self) -> Section:
        return self._sections[SectionType.DESC_BI]

    @property
    def description_trigrams(self) -> Section:
        return self._sections[SectionType.DESC_TRI]

    @property
    def all_unigrams(self) -> Section:
        return self._sections[SectionType.ALL_UNI]

    @property
    def all_bigrams(self) -> Section:
        return self._sections[SectionType.ALL_BI]

    @property
    def all_trigrams(self) -> Section:
        return self._sections[SectionType.ALL_TRI]

    def is_duplicate(self) -> bool:
        return self.duplicate_id != self.id

    def copy(self) -> AbstractBugReport:
        """A copy sharing the text, with fresh similarity info and no bucket links."""
        clone = _copy.copy(self)
        clone.similarity_info = SimilarityInfo()
        clone._reset_bucket_state()
        return clone

    @abstractmethod
    def _reset_bucket_state(self) -> None:
        """Clear the links and flags that tie this report into a bucket."""

    @abstractmethod
    def master(self) -> MasterBugReport | None:
        """The master of this report's bucket, if known."""

    @abstractmethod
    def is_detected(self) -> bool:
        """Whether the report has been detected as a duplicate."""

    @abstractmethod
    def set_detected(self) -> None:
        """Mark the report as detected."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}(id={self.id}, duplicate_id={self.duplicate_id})"


class MasterBugReport(AbstractBugReport):
    """The first report of a bucket, holding its duplicates in arrival order."""

    def __init__(self, report_id: int, **fields: Any) -> None:
        super().__init__(report_id, report_id, **fields)
        self._duplicates: list[DuplicateBugReport] = []

    def _reset_bucket_state(self) -> None:
        self._duplicates = []

    @property
    def duplicates(self) -> Sequence[DuplicateBugReport]:
        return tuple(self._duplicates)

    def add_duplicate(self, duplicate: DuplicateBugReport) -> None:
        self._duplicates.append(duplicate)

    def has_duplicates(self) -> bool:
        return bool(self._duplicates)

    def whole_bucket(self) -> list[AbstractBugReport]:
        """All duplicates in order, followed by the master itself."""
        return [*self._duplicates, self]

    def latest_timestamp_in_bucket(self) -> int:
        """The timestamp of the last duplicate added, or the master's own."""
        if self._duplicates:
            return self._duplicates[-1].timestamp_in_days
        return self.timestamp_in_days

    def master(self) -> MasterBugReport:
        return self

    def is_detected(self) -> bool:
        return False

    def set_detected(self) -> None:
        pass


class DuplicateBugReport(AbstractBugReport):
    """A report that duplicates an earlier master."""

    def __init__(self, report_id: int, duplicate_id: int, **fields: Any) -> None:
        super().__init__(report_id, duplicate_id, **fields)
        self._detected = False
        self._master: MasterBugReport | None = None

    def _reset_bucket_state(self) -> None:
        self._detected = False
        self._master = None

    def set_master(self, master: MasterBugReport) -> None:
        """Link the master; its id must equal this report's duplicate id."""
        if master is None or master.id != self.duplicate_id:
            found = None if master is None else master.id
            raise ValueError(
                f"report {self.id} duplicates {self.duplicate_id}, not {found}"
            )
        self._master = master

    def master(self) -> MasterBugReport | None:
        return self._master

    def is_detected(self) -> bool:
        return self._detected

    def set_detected(self) -> None:
        self._detected = True