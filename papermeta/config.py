from pathlib import Path
from typing import Any, Union

import yaml
from pydantic import BaseModel, validator

ALLOWED_STAGES = {"extraction", "metadata"}


class Inputs(BaseModel):
    mode: str = "file"  # file | directory
    path: Union[str, list[str]]

    def get_files(self) -> list[Path]:
        paths = [self.path] if isinstance(self.path, str) else self.path
        files = []

        for p in paths:
            p = Path(p)

            if p.is_file():
                files.append(p)
            elif p.is_dir():
                files.extend(sorted(f for f in p.rglob("*") if f.is_file())) # recursive search across multiple levels
        return files

class PipelineConfig(BaseModel):
    inputs: Inputs
    batch_size: int = 16
    stages: list[dict[str, Any]]  # list of dict since we have stage name + stage configs

    @validator("batch_size")
    def check_batch_size(cls, v):
        if v <= 0:
            raise ValueError(f"batch_size must be positive, got {v}")
        return v

    @validator("stages")
    def check_stages(cls, v):
        for stage in v:
            if "name" not in stage:
                raise ValueError(f"Stage without a name: {stage}")
            if stage["name"] not in ALLOWED_STAGES:
                raise ValueError(f"Unsupported stage: {stage['name']}. Allowed: {ALLOWED_STAGES}")

        names = [stage["name"] for stage in v]
        if "extraction" in names and "metadata" in names and names.index("metadata") < names.index("extraction"):
            raise ValueError("The metadata stage needs extracted text and must come after the extraction stage")
        return v

def load_config(path: Union[str, Path]) -> PipelineConfig:
    with open(path) as f:
        raw = yaml.safe_load(f)
    return PipelineConfig(**raw["pipeline"])  # unpack
