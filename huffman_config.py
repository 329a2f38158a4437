# filename: huffman_config.py
import yaml
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict, Optional


@dataclass
class CodecConfig:
    corpus_path: Optional[str] = None
    encoding: str = "utf-8"
    log_level: str = "INFO"
    log_dir: Optional[str] = None

    def get_corpus_path(self) -> Path:
        if self.corpus_path is None:
            raise ValueError("no corpus_path configured")
        return Path(self.corpus_path)

    def merged(self, **overrides: Any) -> "CodecConfig":
        d = {f.name: getattr(self, f.name) for f in fields(self)}
        d.update({k: v for k, v in overrides.items() if v is not None})
        return CodecConfig(**d)


class ConfigLoader:
    @staticmethod
    def load_config(p: str) -> Dict[str, Any]:
        with open(p, "r") as f:
            try:
                d = yaml.safe_load(f) or {}
            except yaml.YAMLError as e:
                raise ValueError(f"{p} is not valid YAML: {e}") from e
        if not isinstance(d, dict):
            raise ValueError(f"{p} must hold a mapping at the top level")
        return d

    @staticmethod
    def load_codec_config(p: str) -> CodecConfig:
        d = ConfigLoader.load_config(p)
        unknown = set(d) - {f.name for f in fields(CodecConfig)}
        if unknown:
            raise ValueError(f"unknown config keys in {p}: {', '.join(sorted(unknown))}")
        return CodecConfig(
            corpus_path=d.get("corpus_path"),
            encoding=d.get("encoding", "utf-8"),
            log_level=d.get("log_level", "INFO"),
            log_dir=d.get("log_dir"),
        )
