import json
from typing import Any, Dict, Iterator, List


def load_json(path: str) -> Dict[str, Any]:
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


def iter_jsonl(path: str) -> Iterator[Dict[str, Any]]:
    """JSON Lines: 빈 줄은 건너뜀"""
    with open(path, "r", encoding="utf-8") as f:
        for line in f:
            line = line.strip()
            if line:
                yield json.loads(line)


def load_frames(path: str) -> List[Dict[str, Any]]:
    """.jsonl 이면 한 줄 = 한 프레임, 아니면 {"frames": [...]} 형태"""
    if path.endswith(".jsonl"):
        return list(iter_jsonl(path))
    return load_json(path).get("frames", [])
