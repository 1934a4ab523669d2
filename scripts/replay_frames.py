"""
녹화된 센서 프레임을 오프라인으로 다시 평가한다.

입력 형식
  - frames.jsonl : 한 줄에 {"bodies": [...]} 하나
  - frames.json  : {"frames": [{"bodies": [...]}, ...]}

예)
  python -m scripts.replay_frames data/recordings/session1.jsonl --min-angle 40 --max-angle 100
"""
from __future__ import annotations
import argparse
import logging
import sys
from collections import Counter
from pathlib import Path

from scripts.libs.jsonio import load_frames
from flexcoach.config.settings import settings
from flexcoach.schemas.frame_dto import FrameRequest
from flexcoach.services.config_store import create_config_store
from flexcoach.services.service_factory import create_frame_service

logger = logging.getLogger("replay_frames")


def parse_args(argv=None):
    p = argparse.ArgumentParser(description="Replay recorded skeleton frames through the evaluator")
    p.add_argument("path", help="frames .json / .jsonl")
    p.add_argument("--min-angle")
    p.add_argument("--max-angle")
    p.add_argument("--abduction-target")
    p.add_argument("--align-required")
    p.add_argument("--side", dest="limb_side")
    p.add_argument("--verbose", action="store_true")
    return p.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else settings.LOG_LEVEL)

    store = create_config_store(settings)
    # max를 먼저 넓혀야 min 변경이 거부되지 않는다
    overrides = [
        ("max_angle", store.set_max_angle),
        ("min_angle", store.set_min_angle),
        ("abduction_target", store.set_abduction_target),
        ("align_required", store.set_align_required),
        ("limb_side", store.set_limb_side),
    ]
    for attr, setter in overrides:
        value = getattr(args, attr)
        if value is None:
            continue
        result = setter(value)
        if not result.accepted:
            print(f"[config] {result.field} rejected: {result.error}", file=sys.stderr)
            return 2

    service = create_frame_service(store)
    classes: Counter = Counter()
    messages: Counter = Counter()

    # 상대 경로가 없으면 녹화 디렉토리에서 찾는다
    path = Path(args.path)
    if not path.exists() and not path.is_absolute():
        path = settings.RECORDINGS_DIR / path

    frames = load_frames(str(path))
    logger.info(f"▶️ replay: {path} ({len(frames)} frames)")
    for idx, raw in enumerate(frames):
        frame = FrameRequest(**raw)
        response = service.process_frame(frame.bodies)
        for person in response.persons:
            classes[person.result.classification.value] += 1
            messages[person.result.message.value] += 1
            angle = person.render.angle_text or "-"
            print(
                f"{idx:05d} id={person.tracking_id} angle={angle} "
                f"class={person.result.classification.value} msg={person.result.message.value}"
            )

    print(f"frames={len(frames)} classifications={dict(classes)} messages={dict(messages)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
