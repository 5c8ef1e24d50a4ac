"""UapiconfBaseModel のテスト。

全モデルは extra="forbid" の厳格モード、frozen=True の不変モードで動作する。
"""

import pytest
from pydantic import ValidationError

from uapiconf.models._base import UapiconfBaseModel


class SampleModel(UapiconfBaseModel):
    """テスト用のサブクラス。"""

    name: str
    value: int


class TestUapiconfBaseModelExtraForbid:
    """extra="forbid" により未定義フィールドが拒否されることを検証。"""

    def test_valid_fields_accepted(self) -> None:
        """定義済みフィールドのみでインスタンス生成が成功する。"""
        model = SampleModel(name="test", value=42)
        assert model.name == "test"
        assert model.value == 42

    def test_extra_field_rejected(self) -> None:
        """未定義フィールドを渡すと ValidationError が発生する。"""
        with pytest.raises(ValidationError, match="extra_forbidden"):
            SampleModel(name="test", value=42, unknown_field="should fail")  # type: ignore[call-arg]


class TestUapiconfBaseModelFrozen:
    """frozen=True により構築後のフィールド変更が禁止されることを検証。"""

    def test_field_assignment_rejected(self) -> None:
        """構築後のフィールド代入で ValidationError が発生する。"""
        model = SampleModel(name="test", value=42)
        with pytest.raises(ValidationError, match="frozen"):
            model.name = "changed"

    def test_hashable(self) -> None:
        """frozen モデルはハッシュ可能。"""
        assert hash(SampleModel(name="a", value=1)) == hash(SampleModel(name="a", value=1))
