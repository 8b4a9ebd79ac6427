"""Benchmark suite for the caesura segmentation engine.

Run:  pytest tests/test_benchmarks.py --benchmark-enable
Skip: pytest tests/ -m "not benchmark"
"""

from __future__ import annotations

import pytest

import caesura
from caesura._normalize import normalize_whitespace
from caesura._rules import build_boundary_rule
from caesura._types import SegmenterOptions

pytestmark = pytest.mark.benchmark

# ---------------------------------------------------------------------------
# Sample texts
# ---------------------------------------------------------------------------

SENTENCE = "Gallia est omnis divisa in partes tres."

BELLUM_GALLICUM = (
    "Gallia est omnis divisa in partes tres, quarum unam incolunt Belgae, "
    "aliam Aquitani, tertiam qui ipsorum lingua Celtae, nostra Galli "
    "appellantur. Hi omnes lingua, institutis, legibus inter se differunt. "
    "Gallos ab Aquitanis Garumna flumen, a Belgis Matrona et Sequana "
    "dividit. Horum omnium fortissimi sunt Belgae. M. Messala et M. Pisone "
    "consulibus regni cupiditate inductus coniurationem nobilitatis fecit. "
    "Legio X. Caesari fidelissima erat; legio II. hiemabat."
)

MARKUP = " ".join(
    f'<s n="{i}">Caesar venit. Hostes <hi rend="b">fugerunt</hi>.</s>'
    for i in range(20)
)

SPEECH = 'Ille " veni vidi vici " dixit. ' * 20

DOCUMENT = " ".join([BELLUM_GALLICUM] * 10)

SAMPLE_TEXTS = {
    "sentence": SENTENCE,
    "bellum_gallicum": BELLUM_GALLICUM,
    "document": DOCUMENT,
}


def test_bench_startup(benchmark):
    """Measure caesura.load(): data validation plus automaton build."""
    benchmark.pedantic(caesura.load, rounds=5, iterations=1, warmup_rounds=0)


@pytest.mark.parametrize("text_key", list(SAMPLE_TEXTS.keys()))
def test_bench_segment_e2e(benchmark, segmenter, text_key):
    """End-to-end segment() across text sizes."""
    text = SAMPLE_TEXTS[text_key]
    benchmark.extra_info["text_key"] = text_key
    benchmark.extra_info["n_chars"] = len(text)
    result = benchmark(segmenter.segment, text)
    assert result


def test_bench_segment_xml(benchmark, segmenter):
    result = benchmark(segmenter.segment, MARKUP, xml=True)
    assert len(result) == 40


def test_bench_rule_build(benchmark, segmenter):
    opts = SegmenterOptions()
    benchmark(build_boundary_rule, opts, segmenter.abbreviations)


def test_bench_abbreviation_scan(benchmark, segmenter):
    benchmark(segmenter.abbreviations.scan_ends, DOCUMENT)


def test_bench_normalize(benchmark):
    result = benchmark(normalize_whitespace, SPEECH)
    assert '"veni vidi vici"' in result
