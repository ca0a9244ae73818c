"""Tests for the shared port formatting helpers."""

from __future__ import annotations

from pathlib import Path

import pytest

from compose_scaffold.core.configure import get_compose_ports, get_expose_statements, service_name_from_folder


class TestExposeStatements:
    def test_one_line_per_port_in_order(self) -> None:
        assert get_expose_statements([8080, 3000, 5000]) == "EXPOSE 8080\nEXPOSE 3000\nEXPOSE 5000"

    def test_single_port(self) -> None:
        assert get_expose_statements([3000]) == "EXPOSE 3000"

    def test_no_ports(self) -> None:
        assert get_expose_statements([]) == ""
        assert get_expose_statements(None) == ""


class TestComposePorts:
    def test_maps_ports_one_to_one(self) -> None:
        assert get_compose_ports([3000, 8000]) == "    ports:\n      - 3000:3000\n      - 8000:8000"

    def test_debug_port_is_appended_last(self) -> None:
        assert get_compose_ports([3000], 5678) == "    ports:\n      - 3000:3000\n      - 5678:5678"

    def test_debug_port_without_caller_ports(self) -> None:
        assert get_compose_ports([], 5678) == "    ports:\n      - 5678:5678"

    def test_nothing_to_map(self) -> None:
        assert get_compose_ports([]) == ""


class TestServiceNameFromFolder:
    def test_lowercases_folder_name(self, tmp_path: Path) -> None:
        folder = tmp_path / "MyApp"
        folder.mkdir()
        assert service_name_from_folder(folder) == "myapp"

    def test_replaces_unsafe_characters(self, tmp_path: Path) -> None:
        folder = tmp_path / "my app.v2"
        folder.mkdir()
        assert service_name_from_folder(folder) == "my-app-v2"

    def test_rejects_names_without_usable_characters(self, tmp_path: Path) -> None:
        folder = tmp_path / "..."
        folder.mkdir()
        with pytest.raises(ValueError, match="Cannot derive"):
            service_name_from_folder(folder)
