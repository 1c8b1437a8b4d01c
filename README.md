# dupreport

Building blocks for finding duplicate bug reports:

- a bug report model: terms, sections, and master and duplicate reports (`dupreport.terms`, `dupreport.sections`, `dupreport.reports`)
- a reader for preprocessed report files and their timestamp files (`dupreport.reader`)
- inverse document frequency collections (`dupreport.idf`)
- cosine similarity measures, plain (`dupreport.cosine`) and "combo" (`dupreport.combo`), with a factory that picks one by numeric code (`dupreport.factory`)
- a queue that ranks candidate masters by similarity (`dupreport.ranking_queue`)
- model parameters read from a configuration file (`dupreport.rep_parameter`) and learnable categorical weights (`dupreport.surface_weight`)
- an abstract pairwise RankNet training loop (`dupreport.ranknet`)

It needs Python 3.10 or later and no third-party libraries.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Report file format

A report file is a series of sixteen-line records, one field per line, in this order:

```
ID=12
S-U=3:1,7:2
S-B=40:1
S-T=
D-U=3:2,9:1
D-B=
D-T=
A-U=3:3,7:2,9:1
A-B=40:1
A-T=
DID=
VERSION=1
COMPONENT=4
SUB-COMPONENT=0
TYPE=1
PRIORITY=2
```

- Each term list holds comma-separated `term_id:frequency` pairs; it may be empty.
- An empty `DID=` marks a master report. A `DID=` that holds another report's id marks a duplicate of that report.
- An empty categorical value (`VERSION=` and so on) reads as 0.
- Reading stops at the first empty line where an `ID=` line is expected.

A timestamp file holds `report_id=days` entries, one per line.

## Usage

### Reading reports

```python
from dupreport.reader import read_reports, ReportDataset, TimestampMap

reports, max_term_id = read_reports("reports.txt", "timestamps.txt")

dataset = ReportDataset("reports.txt", "timestamps.txt")
fresh = dataset.copies()  # copies of every report, in file order, with no bucket links
```

Without a timestamp path every report gets timestamp 0. With one, a report whose id is missing from it raises `KeyError`. A file that does not follow the format raises `ReportFormatError` (a `ValueError`). `parse_terms("3:1,7:2")` parses a single term list.

### Reports and buckets

```python
from dupreport.reports import MasterBugReport, DuplicateBugReport
from dupreport.terms import Term

master = MasterBugReport(1, summary_unigrams=[Term(3, 1)], timestamp_in_days=10)
dup = DuplicateBugReport(2, 1, description_unigrams=[Term(3, 2)], timestamp_in_days=12)

master.add_duplicate(dup)
dup.set_master(master)           # ValueError if the ids do not match
bucket = master.whole_bucket()   # the duplicates first, then the master
master.latest_timestamp_in_bucket()  # 12
```

Each report exposes its nine sections (`summary_unigrams` … `all_trigrams`, or `section(SectionType.X)`), the merged `structured_unigrams` and `structured_bigrams`, the categorical fields, and a `similarity_info` scratch record.

### IDF collections

```python
from dupreport.idf import IDFCollection

idf = IDFCollection(max_term_id)
for report in reports:
    idf.add_one_report(report.all_unigrams.terms, report.all_bigrams.terms)
print(idf.get_idf(3))  # log2(documents / documents containing the term), 0 if none
```

### Similarity measures

```python
from dupreport.factory import (
    SimilarityMeasureType,
    create_similarity_measure,
    similarity_measure_type_mapping,
)

print(similarity_measure_type_mapping())
measure = create_similarity_measure(SimilarityMeasureType.ICSE_08_W2_NO_BIGRAM)
score = measure.compute_similarity(query, candidate, buckets)
```

The `buckets` argument must provide `idf_collection(collection_type)`, returning an `IDFCollection` for an `IDFCollectionType` (`IDF_BOTH` for the plain measures, `IDF_SUMM` and `IDF_DESC` for the combo ones). Term weight vectors are cached per report id on the measure. Unknown codes and `NONE` raise `ValueError`.

### Ranking candidate masters

```python
from dupreport.ranking_queue import MasterReportPriorityQueue

queue = MasterReportPriorityQueue()
for candidate in candidates:
    queue.add(candidate)          # reads candidate.similarity_info.similarity now
ranked = queue.drain_sorted()     # highest similarity first; ties in insertion order
```

### Model parameters

`load_rep_parameter(path)` reads a `KEY = value` file (`#` starts a comment) and returns a frozen `DefaultREPParameter`. Every field is required under its upper-case name, for example `UNIGRAM_WEIGHT`, `K1`, `K1_FIXED`, `COUNT_OF_IRRELEVANT_REPORTS_PER_QUERY` and `MAX_QUERY_COUNT`. A missing file, a missing key or a bad value raises `ConfigError`. `DefaultREPParameter.from_mapping(values)` builds one from a dict.

`SurfaceWeight` holds learnable weights (each a `ParameterPair` of value and fixed flag) for component, sub-component, report type, priority and version. The `increase_*_weight` methods raise `ValueError` on a fixed weight; sub-component, report-type and priority weights never drop below zero. `describe()` returns a readable listing.

### Training with RankNet

Subclass `AbstractRankNetLearner` and implement `compute_similarity`, `initialize_model_parameters`, `before_tune`, `tune_on_pair`, `after_tune`, `found_better_model`, `learning_done` and `training_round_count`. The `buckets` object passed in must provide `all_bucket_masters()`. Then call `learn()`: it builds (query, relevant, irrelevant) triples from the buckets and runs 24 epochs of gradient descent per round on the cost `log(1 + exp(Y))`. Pass a seeded `random.Random` as `rng` for repeatable sampling.

## What this package does not do

- There is no command-line program.
- There is no bucket container: you supply the object that hands out IDF collections and bucket masters.
- There is no concrete learner: no BM25F model or categorical similarity is included, only the abstract training loop and the weight records.