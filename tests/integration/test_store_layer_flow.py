"""Integration tests combining typed stores and layer expansion."""

from __future__ import annotations

import numpy

from layers.layer_set import LayerSet
from store.chain import Chain
from store.context import Context


def test_expand_option_grid_and_query_each_stack() -> None:
    """Layer stacks should round through chains and typed queries."""
    options = Context(
        {
            "backend": ["cpu", "gpu"],
            "batch_size": [numpy.int64(16), 32],
            "dropout": [0.1],
        }
    )
    layer_set: LayerSet[object] = LayerSet()
    for entry in options.find_entries(list):
        layer_set.extend(entry.value, entry.position)

    chains = [Chain(stack) for stack in layer_set.expand()]
    batch_sizes = [chain.first(int).value for chain in chains]
    gpu_chains = [chain for chain in chains if chain.first(str, lambda value: value == "gpu")]

    assert len(chains) == 4
    assert batch_sizes == [16, 32, 16, 32]
    assert len(gpu_chains) == 2


def test_context_builder_feeds_sparse_layers() -> None:
    """Keyed positions should map onto dense layers with empty gaps."""
    builder = Context.builder()
    builder.put("first", "a").put("skipped", None).put("third", "c")
    context = builder.build()
    layer_set: LayerSet[str] = LayerSet()
    for entry in context.find_entries(str):
        layer_set.append(entry.value, entry.position)

    assert len(layer_set) == 3
    assert layer_set.expand() == []
