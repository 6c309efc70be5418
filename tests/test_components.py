import pytest

from disjoint_labels.components import ComponentLabeler, ComponentsConfig, connected_components
from disjoint_labels.structures import LabelOutOfRangeError


def test_connected_components_relabels_densely():
    edges = [(5, 6), (1, 3), (3, 4)]
    assert connected_components(7, edges) == [0, 1, 2, 1, 1, 3, 3]


def test_connected_components_min_label():
    assert connected_components(3, [(0, 2)], min_label=1) == [1, 2, 1]


def test_labeler_collects_stats():
    labeler = ComponentLabeler(ComponentsConfig(use_tqdm=False))
    result = labeler.label(6, [(0, 1), (1, 2), (2, 0), (4, 4), (5, 3)])

    assert result.labels.tolist() == [0, 0, 0, 1, 2, 1]
    assert result.components == {0: [0, 1, 2], 1: [3, 5], 2: [4]}
    assert result.sizes().tolist() == [3, 2, 1]
    assert result.stats.element_count == 6
    assert result.stats.edge_count == 5
    assert result.stats.merges == 3
    assert result.stats.redundant_edges == 2
    assert result.stats.component_count == 3


def test_labeler_with_min_label():
    labeler = ComponentLabeler(ComponentsConfig(min_label=10, use_tqdm=False))
    result = labeler.label(3, [(1, 2)])
    assert result.labels.tolist() == [10, 11, 11]
    assert result.sizes().tolist() == [1, 2]


def test_labeler_without_edges():
    result = ComponentLabeler(ComponentsConfig(use_tqdm=False)).label(0, [])
    assert result.labels.tolist() == []
    assert result.components == {}
    assert result.stats.component_count == 0


def test_labeler_rejects_bad_edges():
    labeler = ComponentLabeler(ComponentsConfig(use_tqdm=False))
    with pytest.raises(LabelOutOfRangeError):
        labeler.label(2, [(0, 2)])


def test_labeler_verbose_output(capsys):
    labeler = ComponentLabeler(ComponentsConfig(verbose=True, use_tqdm=False))
    labeler.label(3, [(0, 1)])
    captured = capsys.readouterr()
    assert "Labeling 3 elements from 1 edges" in captured.out
    assert "Found 2 components" in captured.out
