"""全ドメインモデルの基底クラス。

extra="forbid" と frozen=True による厳格・不変モデルを一元管理する。
"""

from pydantic import BaseModel, ConfigDict


class UapiconfBaseModel(BaseModel):
    """全ドメインモデルの基底クラス。extra="forbid" で厳格モードを一元管理。"""

    model_config = ConfigDict(extra="forbid", frozen=True)
