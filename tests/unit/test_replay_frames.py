import json

from scripts.libs.jsonio import load_frames
from scripts.replay_frames import main
from tests.test_helpers import arm_skeleton, skeleton_payload


def _body(tracking_id, angle):
    return {"tracking_id": tracking_id, **skeleton_payload(arm_skeleton(angle))}


def _write_jsonl(path, frames):
    path.write_text("\n".join(json.dumps(f) for f in frames) + "\n\n", encoding="utf-8")
    return path


def test_load_frames_jsonl_and_json(tmp_path):
    frames = [{"bodies": []}, {"bodies": [_body(1, 90.0)]}]
    jsonl = _write_jsonl(tmp_path / "frames.jsonl", frames)
    js = tmp_path / "frames.json"
    js.write_text(json.dumps({"frames": frames}), encoding="utf-8")

    assert load_frames(str(jsonl)) == frames
    assert load_frames(str(js)) == frames


def test_replay_prints_per_person_lines(tmp_path, capsys):
    frames = [
        {"bodies": [_body(1, 90.0)]},
        {"bodies": [_body(1, 170.0), _body(2, 60.0)]},
    ]
    path = _write_jsonl(tmp_path / "session.jsonl", frames)

    code = main([str(path), "--min-angle", "40", "--max-angle", "100"])

    out = capsys.readouterr().out
    assert code == 0
    assert "00000 id=1 angle=90.0° class=InRange" in out
    assert "00001 id=1 angle=170.0° class=OutOfRange" in out
    assert "00001 id=2" in out
    assert "frames=2" in out


def test_rejected_override_exits_with_error(tmp_path, capsys):
    path = _write_jsonl(tmp_path / "session.jsonl", [{"bodies": []}])

    code = main([str(path), "--min-angle", "95"])

    assert code == 2
    assert "min_angle rejected" in capsys.readouterr().err
