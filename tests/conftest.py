import json
import sys
import os
import pytest

# 프로젝트 루트를 sys.path에 추가
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
if project_root not in sys.path:
    sys.path.insert(0, project_root)

from py_ecc import bn128

from circom_input.config import BN254
from circom_input.pairing import curve_context


g1 = bn128.G1
g2 = bn128.G2
mult = bn128.multiply

# ── 테스트 상수 (스칼라) ──
ALPHA = 5
BETA = 7
GAMMA = 11
DELTA = 13
IC_SCALARS = [2, 3, 4]
PI_A = 17
PI_B = 19
PI_C = 23

PUBLIC_SIGNALS = ["35", "3"]


def g1_json(point):
    """py_ecc G1 점 → snarkjs ["x", "y", "1"]"""
    if point is None:
        return ["0", "1", "0"]
    return [str(int(point[0])), str(int(point[1])), "1"]


def g2_json(point):
    """py_ecc G2 점 → snarkjs [["x0","x1"],["y0","y1"],["1","0"]]"""
    if point is None:
        return [["0", "0"], ["1", "0"], ["0", "0"]]
    return [
        [str(int(point[0].coeffs[0])), str(int(point[0].coeffs[1]))],
        [str(int(point[1].coeffs[0])), str(int(point[1].coeffs[1]))],
        ["1", "0"],
    ]


@pytest.fixture(scope="session")
def vkey_data():
    """실제 BN254 점으로 만든 snarkjs 형식 verification key."""
    return {
        "protocol": "groth16",
        "curve": "bn128",
        "nPublic": len(PUBLIC_SIGNALS),
        "vk_alpha_1": g1_json(mult(g1, ALPHA)),
        "vk_beta_2": g2_json(mult(g2, BETA)),
        "vk_gamma_2": g2_json(mult(g2, GAMMA)),
        "vk_delta_2": g2_json(mult(g2, DELTA)),
        "IC": [g1_json(mult(g1, s)) for s in IC_SCALARS],
    }


@pytest.fixture(scope="session")
def proof_data():
    return {
        "pi_a": g1_json(mult(g1, PI_A)),
        "pi_b": g2_json(mult(g2, PI_B)),
        "pi_c": g1_json(mult(g1, PI_C)),
        "protocol": "groth16",
        "curve": "bn128",
    }


@pytest.fixture(scope="session")
def public_data():
    return list(PUBLIC_SIGNALS)


@pytest.fixture
def cheap_vkey(vkey_data):
    """vk_alpha_1이 무한원점인 vkey. 페어링이 항등원으로 바로 끝난다."""
    vkey = dict(vkey_data)
    vkey["vk_alpha_1"] = ["0", "1", "0"]
    return vkey


@pytest.fixture
def off_curve_vkey(vkey_data):
    """vk_alpha_1이 곡선 위에 없는 vkey. 페어링 라이브러리가 실패한다."""
    vkey = dict(vkey_data)
    vkey["vk_alpha_1"] = ["1", "1", "1"]
    return vkey


@pytest.fixture
def curve():
    with curve_context(BN254) as context:
        yield context


@pytest.fixture
def write_artifacts(tmp_path):
    """(vkey, proof, public) dict를 파일로 쓰고 경로를 돌려주는 헬퍼."""
    def _write(vkey, proof, public):
        paths = []
        for name, doc in (("vkey_raw.json", vkey), ("proof_raw.json", proof),
                          ("public_raw.json", public)):
            path = tmp_path / name
            path.write_text(json.dumps(doc))
            paths.append(str(path))
        return paths
    return _write
