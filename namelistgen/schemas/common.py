# namelistgen/schemas/common.py
from enum import Enum
from pydantic import BaseModel, ConfigDict


class AppBaseModel(BaseModel):
    """모든 모델의 부모 클래스: V2 설정 적용"""

    model_config = ConfigDict(
        populate_by_name=True,
        extra="ignore",
        from_attributes=True,
    )


class OutputMode(str, Enum):
    """생성 파일의 형태"""

    FIELDS = "Fields"
    DICTIONARY = "Dictionary"
