"""
LedgerView Test Vectors

Seeded sample generation and test-vector emission.

Usage:
    from ledgerview.vectors import SampleGenerator, build_vectors, write_vectors

    samples = SampleGenerator(seed).generate()
    vectors = build_vectors(samples, profile.geometry, profile.thresholds)
    write_vectors(vectors, "vectors.json")
"""
from __future__ import annotations

from .generator import (
    DEFAULT_SEED,
    GenerationStats,
    SampleGenerator,
    argument_pool,
    execution_descriptors,
)
from .output import (
    RECORD_KEYS,
    TestVector,
    VectorDiff,
    build_vector,
    build_vectors,
    diff_vectors,
    dumps_vectors,
    read_vectors,
    render_page_lines,
    vector_set_fingerprint,
    write_vectors,
)
from .sample import Sample

__all__ = [
    # Samples
    "Sample",
    "DEFAULT_SEED",
    "GenerationStats",
    "SampleGenerator",
    "argument_pool",
    "execution_descriptors",
    # Output
    "RECORD_KEYS",
    "TestVector",
    "VectorDiff",
    "build_vector",
    "build_vectors",
    "diff_vectors",
    "dumps_vectors",
    "read_vectors",
    "render_page_lines",
    "vector_set_fingerprint",
    "write_vectors",
]
