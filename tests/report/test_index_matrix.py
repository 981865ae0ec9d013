"""Tests for the Index and Matrix views built from metric documents."""

import pytest

from cohesion_peek.exceptions import AggregationError
from cohesion_peek.report import Index, Matrix, Renderer, Report


def save_all(metric_types, base, templates, output):
    renderer = Renderer(templates)
    for metric_type in metric_types:
        Report(metric_type(base), renderer).save(output)
    return [metric_type.name for metric_type in metric_types]


@pytest.fixture
def saved(m1_m2, two_classes, templates, tmp_path):
    return tmp_path, save_all(m1_m2, two_classes, templates, tmp_path)


def section(index, name):
    return next(m for m in index.findall("metric") if m.get("name") == name)


class TestIndex:
    def test_sections_in_metric_order(self, saved):
        output, names = saved
        index = Index(output, names).value()
        assert index.tag == "metrics"
        assert [m.get("name") for m in index.findall("metric")] == ["M1", "M2"]
        assert index.get("score") is None

    def test_metric_scores(self, saved):
        index = Index(*saved).value()
        assert section(index, "M1").findtext("score") == "0.75"
        assert section(index, "M2").findtext("score") == "0.5"

    def test_summary_fields(self, saved):
        m2 = section(Index(*saved).value(), "M2")
        assert m2.findtext("classes") == "2"
        assert m2.findtext("elements") == "2"
        assert m2.findtext("min") == "0.0"
        assert m2.findtext("max") == "1.0"
        assert (m2.findtext("green"), m2.findtext("yellow"), m2.findtext("red")) == ("1", "0", "1")
        assert m2.findtext("html") == "M2.html"
        assert m2.findtext("xml") == "M2.xml"
        assert m2.findtext("reverse") == "false"

    def test_one_score_node_per_metric(self, saved):
        for metric in Index(*saved).value().findall("metric"):
            assert len(metric.findall("score")) == 1

    def test_undefined_metric_scores_zero(self, make_metric, two_classes, templates, tmp_path):
        nan = float("nan")
        names = save_all(
            [make_metric("N", {"class1": nan, "class2": nan})], two_classes, templates, tmp_path
        )
        n = section(Index(tmp_path, names).value(), "N")
        assert n.findtext("score") == "0.0"
        assert n.findtext("elements") == "0"
        assert n.findtext("min") == "NaN"
        assert [c.get("color") for c in n.findall("class")] == ["gray", "gray"]

    def test_partially_defined_metric(self, make_metric, two_classes, templates, tmp_path):
        names = save_all(
            [make_metric("H", {"class1": float("nan"), "class2": 0.25})],
            two_classes,
            templates,
            tmp_path,
        )
        h = section(Index(tmp_path, names).value(), "H")
        assert h.findtext("score") == "0.25"
        assert h.findtext("classes") == "2"
        assert h.findtext("elements") == "1"

    def test_missing_document(self, saved):
        output, names = saved
        (output / "M2.xml").unlink()
        with pytest.raises(AggregationError):
            Index(output, names).value()


class TestMatrix:
    def test_header(self, saved):
        matrix = Matrix(*saved).value()
        assert [m.get("name") for m in matrix.findall("metrics/metric")] == ["M1", "M2"]

    def test_rows(self, saved):
        matrix = Matrix(*saved).value()
        rows = {
            row.get("id"): [(c.get("metric"), c.get("value")) for c in row.findall("cohesion")]
            for row in matrix.findall("classes/class")
        }
        assert rows == {
            "class1": [("M1", "1.0"), ("M2", "0.0")],
            "class2": [("M1", "0.5"), ("M2", "1.0")],
        }

    def test_rows_sorted(self, saved):
        ids = [row.get("id") for row in Matrix(*saved).value().findall("classes/class")]
        assert ids == sorted(ids)


class TestConsistency:
    def test_index_and_matrix_quote_same_values(self, saved):
        index = Index(*saved).value()
        matrix = Matrix(*saved).value()
        from_index = {
            (m.get("name"), c.get("id")): c.get("value")
            for m in index.findall("metric")
            for c in m.findall("class")
        }
        from_matrix = {
            (c.get("metric"), row.get("id")): c.get("value")
            for row in matrix.findall("classes/class")
            for c in row.findall("cohesion")
        }
        assert from_index == from_matrix
