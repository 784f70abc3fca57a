import json

from circom_input.cli import build_parser, main
from circom_input.config import DEFAULT_BUILD_DIR, DEFAULT_OUTPUT
from circom_input.encoder import zero_fp12


class TestParser:
    def test_defaults(self):
        args = build_parser().parse_args([])
        assert args.build_dir == DEFAULT_BUILD_DIR
        assert args.output == DEFAULT_OUTPUT
        assert args.allow_placeholder is False


class TestMain:
    def test_build_dir_layout(self, write_artifacts, cheap_vkey, proof_data, public_data, tmp_path):
        """--build-dir 아래의 *_raw.json 세 파일을 읽는다."""
        write_artifacts(cheap_vkey, proof_data, public_data)
        out = tmp_path / "input.json"
        code = main(["--build-dir", str(tmp_path), "--output", str(out)])
        assert code == 0
        doc = json.loads(out.read_text())
        assert list(doc.keys()) == [
            "negalfa1xbeta2", "gamma2", "delta2", "IC", "negpa", "pb", "pc", "pubInput"]

    def test_explicit_paths(self, write_artifacts, cheap_vkey, proof_data, public_data, tmp_path):
        vkey, proof, public = write_artifacts(cheap_vkey, proof_data, public_data)
        out = tmp_path / "out.json"
        code = main(["--vkey", vkey, "--proof", proof, "--public", public,
                     "--output", str(out)])
        assert code == 0
        assert json.loads(out.read_text())["pubInput"] == public_data

    def test_missing_files_exit_code(self, tmp_path):
        out = tmp_path / "input.json"
        code = main(["--build-dir", str(tmp_path / "missing"), "--output", str(out)])
        assert code == 1
        assert not out.exists()

    def test_malformed_json_exit_code(self, tmp_path, proof_data, public_data, write_artifacts):
        vkey, proof, public = write_artifacts({}, proof_data, public_data)
        with open(vkey, "w") as f:
            f.write("{")
        out = tmp_path / "input.json"
        assert main(["--build-dir", str(tmp_path), "--output", str(out)]) == 1
        assert not out.exists()

    def test_non_utf8_input_exit_code(self, tmp_path, proof_data, public_data, write_artifacts):
        vkey, proof, public = write_artifacts({}, proof_data, public_data)
        with open(vkey, "wb") as f:
            f.write(b"\xff\xff")
        out = tmp_path / "input.json"
        assert main(["--build-dir", str(tmp_path), "--output", str(out)]) == 1
        assert not out.exists()

    def test_pairing_failure_is_fatal_by_default(self, write_artifacts, off_curve_vkey,
                                                 proof_data, public_data, tmp_path):
        write_artifacts(off_curve_vkey, proof_data, public_data)
        out = tmp_path / "input.json"
        assert main(["--build-dir", str(tmp_path), "--output", str(out)]) == 1
        assert not out.exists()

    def test_allow_placeholder(self, write_artifacts, off_curve_vkey,
                               proof_data, public_data, tmp_path):
        write_artifacts(off_curve_vkey, proof_data, public_data)
        out = tmp_path / "input.json"
        code = main(["--build-dir", str(tmp_path), "--output", str(out),
                     "--allow-placeholder"])
        assert code == 0
        assert json.loads(out.read_text())["negalfa1xbeta2"] == zero_fp12()
