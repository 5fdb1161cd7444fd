"""Tests for report rendering."""

from __future__ import annotations

import json
from datetime import datetime

from bundlesize.core.analyzer import analyze_bundle_size
from bundlesize.core.report import generate_json_report, generate_report, size_bar
from bundlesize.models.analysis_result import AnalysisResult
from bundlesize.models.limits import DEFAULT_LIMITS, SizeLimits

KB = 1024


class TestSizeBar:
    def test_one_block_per_started_ten_kb(self):
        assert size_bar(0) == ""
        assert size_bar(0.5) == "█"
        assert size_bar(10) == "█"
        assert size_bar(10.1) == "██"

    def test_capped_at_twenty(self):
        assert size_bar(5000) == "█" * 20


class TestTextReport:
    def test_passing_report(self, build_dir):
        report = generate_report(analyze_bundle_size(build_dir), "chrome")

        assert "📦 Bundle Size Analysis for chrome" in report
        assert "📊 Total Size: 163 KB" in report
        assert "📁 Total Files: 3" in report
        assert "🔝 Largest Chunk: content/index.js (120 KB)" in report.replace("\\", "/")
        assert "Warnings" not in report
        assert "Errors" not in report
        assert report.rstrip().endswith("✅ Bundle size check PASSED")

    def test_file_lines_are_padded_with_bar(self, tmp_path, make_file):
        make_file(tmp_path / "app.js", 25 * KB)
        report = generate_report(analyze_bundle_size(tmp_path), "firefox")
        assert "       25 KB │ ███ app.js" in report

    def test_file_lines_follow_size_order(self, build_dir):
        report = generate_report(analyze_bundle_size(build_dir), "chrome")
        assert report.index("index.js") < report.index("background.js") < report.index("popup.css")

    def test_failing_report_lists_messages(self, tmp_path, make_file):
        make_file(tmp_path / "big.js", 300 * KB)
        make_file(tmp_path / "mid.js", 210 * KB)
        report = generate_report(analyze_bundle_size(tmp_path), "chrome")

        assert "⚠️  Warnings:" in report
        assert '  - Chunk "mid.js" (210 KB) is approaching limit of 250KB' in report
        assert "❌ Errors:" in report
        assert "  - Total bundle size (510 KB) exceeds limit of 500KB" in report
        assert report.index("Warnings") < report.index("Errors:")
        assert report.rstrip().endswith("❌ Bundle size check FAILED")

    def test_empty_result(self):
        report = generate_report(AnalysisResult(), "safari")
        assert "📁 Total Files: 0" in report
        assert "Largest Chunk" not in report
        assert "PASSED" in report


class TestJsonReport:
    def test_document_shape(self, build_dir):
        result = analyze_bundle_size(build_dir)
        data = json.loads(generate_json_report({"chrome": result}))

        assert set(data) == {"timestamp", "config", "results"}
        assert datetime.fromisoformat(data["timestamp"]).tzinfo is not None
        assert data["config"] == DEFAULT_LIMITS.to_dict()

        chrome = data["results"]["chrome"]
        assert chrome["totalSizeBytes"] == 163 * KB
        assert chrome["totalSizeKB"] == 163
        assert chrome["totalSizeFormatted"] == "163 KB"
        assert chrome["passed"] is True
        assert chrome["errors"] == []
        assert chrome["largestChunk"] == chrome["files"][0]
        assert set(chrome["files"][0]) == {"file", "sizeBytes", "sizeKB", "sizeFormatted"}

    def test_multiple_targets_merge(self, build_dir, tmp_path):
        results = {
            "chrome": analyze_bundle_size(build_dir),
            "firefox": analyze_bundle_size(tmp_path / "missing"),
        }
        data = json.loads(generate_json_report(results))
        assert list(data["results"]) == ["chrome", "firefox"]
        assert data["results"]["firefox"]["largestChunk"] is None

    def test_active_limits_recorded(self):
        limits = SizeLimits(max_total_size_kb=800, max_chunk_size_kb=400, exclude=(".map",))
        data = json.loads(generate_json_report({}, limits))
        assert data["config"] == {"maxTotalSizeKB": 800, "maxChunkSizeKB": 400, "exclude": [".map"]}
        assert data["results"] == {}
