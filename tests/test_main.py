"""
End-to-end tests for the CLI composition root, in offline mode.
"""

import json

import pytest

from alchemy.__main__ import main, parse_pair


class TestParsePair:
    def test_split(self):
        assert parse_pair("Ateş+Su") == ("Ateş", "Su")

    @pytest.mark.parametrize("text", ["Ateş", "+Su", "Ateş+", "Ateş+Su+Hava"])
    def test_rejects(self, text):
        with pytest.raises(Exception):
            parse_pair(text)


class TestMain:
    def test_offline_discovery(self, capsys):
        main(["--offline", "--quiet", "Ateş+Su", "Su+Ateş", "Su+Su"])
        out = capsys.readouterr().out.splitlines()
        assert out[0] == "Ateş + Su: Yeni Keşif: 💨 Buhar!"
        assert out[1] == "Su + Ateş: 💨 Buhar (zaten biliniyor)"
        assert out[2] == "Su + Su: Bu kombinasyon bir şey oluşturmadı."

    def test_summary_printed(self, capsys):
        main(["--offline", "Ateş+Su", "Buhar+Hava"])
        out = capsys.readouterr().out
        assert "☁️ Bulut *" in out
        assert "Buhar+Hava -> ☁️ Bulut" in out
        assert "generator calls: 2" in out

    def test_inventory_saved_and_reloaded(self, tmp_path, capsys):
        path = str(tmp_path / "inv.json")
        main(["--offline", "--quiet", "--inventory", path, "Ateş+Toprak"])
        names = [e["name"] for e in json.loads(open(path, encoding="utf-8").read())]
        assert names == ["Su", "Ateş", "Toprak", "Hava", "Lav"]

        main(["--offline", "--quiet", "--inventory", path, "Lav+Su"])
        names = [e["name"] for e in json.loads(open(path, encoding="utf-8").read())]
        assert names[-2:] == ["Lav", "Taş"]

    def test_reset(self, tmp_path, capsys):
        path = str(tmp_path / "inv.json")
        main(["--offline", "--quiet", "--inventory", path, "Ateş+Toprak"])
        main(["--offline", "--quiet", "--inventory", path, "--reset"])
        names = [e["name"] for e in json.loads(open(path, encoding="utf-8").read())]
        assert names == ["Su", "Ateş", "Toprak", "Hava"]

    def test_llm_without_key_is_an_error(self, monkeypatch):
        monkeypatch.delenv("ANTHROPIC_API_KEY", raising=False)
        with pytest.raises(SystemExit):
            main(["Ateş+Su"])

    def test_corrupt_inventory_starts_over(self, tmp_path, capsys):
        path = tmp_path / "inv.json"
        path.write_text("{not json", encoding="utf-8")
        main(["--offline", "--quiet", "--inventory", str(path), "Ateş+Su"])
        assert capsys.readouterr().out.splitlines()[0] == "Ateş + Su: Yeni Keşif: 💨 Buhar!"
        names = [e["name"] for e in json.loads(path.read_text(encoding="utf-8"))]
        assert names == ["Su", "Ateş", "Toprak", "Hava", "Buhar"]

    def test_invalid_records_start_over(self, tmp_path, capsys):
        path = tmp_path / "inv.json"
        path.write_text('[{"foo": 1}]', encoding="utf-8")
        main(["--offline", "--quiet", "--inventory", str(path), "Ateş+Toprak"])
        names = [e["name"] for e in json.loads(path.read_text(encoding="utf-8"))]
        assert names == ["Su", "Ateş", "Toprak", "Hava", "Lav"]

    def test_unowned_element_refused(self, capsys):
        main(["--offline", "--quiet", "Buhar+Hava", "Ateş+Su"])
        out = capsys.readouterr().out.splitlines()
        assert out[0] == "Buhar + Hava: Envanterde yok: Buhar"
        assert out[1] == "Ateş + Su: Yeni Keşif: 💨 Buhar!"

    @pytest.mark.parametrize("var", ["ALCHEMY_TIMEOUT", "ALCHEMY_TEMPERATURE"])
    def test_bad_numeric_setting_is_an_error(self, monkeypatch, capsys, var):
        monkeypatch.setenv(var, "fast")
        with pytest.raises(SystemExit) as exc:
            main(["--offline", "Ateş+Su"])
        assert exc.value.code == 2
        assert "ALCHEMY_" in capsys.readouterr().err
