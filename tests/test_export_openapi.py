from __future__ import annotations

import json

from catalog_api.export_openapi import main


def test_export_writes_document(tmp_path, capsys) -> None:
    output = tmp_path / "openapi" / "spec.json"

    assert main(["--output", str(output)]) == 0

    document = json.loads(output.read_text(encoding="utf-8"))
    assert document["openapi"].startswith("3.")
    assert "/api/products/{product_id}/stock" in document["paths"]
    assert "generated at" in capsys.readouterr().out


def test_export_honours_prefix(tmp_path) -> None:
    output = tmp_path / "spec.json"

    main(["-o", str(output), "--api-prefix", "/catalog"])

    paths = json.loads(output.read_text(encoding="utf-8"))["paths"]
    assert "/catalog/users/" in paths
    assert "/health" in paths
