from pydantic import BaseModel, ConfigDict


class Task(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    dependencies: list[str] = []


class BlockedInfo(BaseModel):
    """An incomplete task with at least one dependency outside the completed set."""

    model_config = ConfigDict(frozen=True)

    task_id: str
    task_name: str
    missing_dependencies: list[str]
