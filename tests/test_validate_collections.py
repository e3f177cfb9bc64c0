import scripts.validate_collections as validate_collections


def test_valid_directory_passes(collections_dir, capsys):
    assert validate_collections.main(["--collections-dir", str(collections_dir)]) == 0
    assert "physics.json (2 questions)" in capsys.readouterr().out


def test_invalid_file_fails(collections_dir, capsys):
    (collections_dir / "broken.json").write_text('[{"question": 1}]', encoding="utf-8")
    assert validate_collections.main(["--collections-dir", str(collections_dir)]) == 1
    assert "broken.json" in capsys.readouterr().err


def test_explicit_paths(collections_dir):
    assert validate_collections.main([str(collections_dir / "physics.json")]) == 0
    assert validate_collections.main([str(collections_dir / "missing.json")]) == 1


def test_empty_directory_fails(tmp_path):
    assert validate_collections.main(["--collections-dir", str(tmp_path)]) == 1


def test_entries_load_as_questions(collections_dir):
    errors = validate_collections.validate_paths([collections_dir / "physics.json"])
    assert errors == []
