from fieldpath.cli import main
from fieldpath.io_utils import load_json


def write_map(tmp_path, text):
    map_file = tmp_path / "map.txt"
    map_file.write_text(text)
    return map_file


def test_cli_finds_path_and_exports(tmp_path, capsys):
    map_file = write_map(tmp_path, "....\n.##.\n....\n")
    out = tmp_path / "path.json"

    code = main(["-i", str(map_file), "--start", "0", "0", "--goal", "3", "2", "-o", str(out)])

    assert code == 0
    assert "Found path" in capsys.readouterr().out
    data = load_json(out)
    assert data["success"] is True
    assert data["path"][0] == [0, 0]
    assert data["path"][-1] == [3, 2]
    assert data["diagonal_movement"] == "NEVER"


def test_cli_reports_failed_search(tmp_path, corridor_map, capsys):
    map_file = write_map(tmp_path, corridor_map)

    code = main(["-i", str(map_file), "--start", "0", "0", "--goal", "6", "0"])

    assert code == 1
    assert "No path found" in capsys.readouterr().out


def test_cli_diagonal_option(tmp_path, capsys):
    map_file = write_map(tmp_path, "....\n....\n....\n....\n")

    code = main(["-i", str(map_file), "--start", "0", "0", "--goal", "1", "1", "--diagonal", "always"])

    assert code == 0
    assert "always" in capsys.readouterr().out


def test_cli_saves_field_image(tmp_path):
    map_file = write_map(tmp_path, "...\n...\n")
    image = tmp_path / "field.png"

    assert main(["-i", str(map_file), "--start", "0", "0", "--goal", "2", "1",
                 "--field-image", str(image)]) == 0
    assert image.exists()


def test_cli_missing_input(tmp_path):
    assert main(["-i", str(tmp_path / "nope.txt"), "--start", "0", "0", "--goal", "1", "1"]) == 1


def test_cli_rejects_out_of_bounds(tmp_path, capsys):
    map_file = write_map(tmp_path, "...\n")
    assert main(["-i", str(map_file), "--start", "0", "0", "--goal", "5", "0"]) == 1
    assert "outside" in capsys.readouterr().out
