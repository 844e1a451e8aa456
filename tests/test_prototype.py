from __future__ import annotations

from typing import Any

import pytest
from pydantic import BaseModel
from pydantic_core import PydanticSerializationError

from adapters.snapshot_clone import snapshot_clone
from core.domain.errors import CloneError
from core.domain.models import Human, Sheep, Trophy
from core.interfaces.prototype import Prototype
from core.services.demos import run_deep_prototype_demo, run_prototype_demo


def test_sheep_clone_is_independent():
    lazy_sheep = Sheep(name="lazySheep")

    duo_li = lazy_sheep.clone()

    assert isinstance(lazy_sheep, Prototype)
    assert duo_li is not lazy_sheep
    assert duo_li == lazy_sheep

    duo_li.name = "duoLi"
    assert lazy_sheep.name == "lazySheep"

    lazy_sheep.name = "changed"
    assert duo_li.name == "duoLi"


def test_trophy_clone_copies_owned_human():
    trophy = Trophy(human=Human(name="ZhangSan"))

    trophy2 = trophy.clone()

    assert trophy2 is not trophy
    assert trophy2.human is not trophy.human
    assert trophy2 == trophy

    trophy2.set_name("LiSi")
    assert trophy.get_name() == "ZhangSan"
    assert trophy2.get_name() == "LiSi"


def test_trophy_shallow_copy_would_share_human():
    trophy = Trophy(human=Human(name="ZhangSan"))

    shallow = trophy.model_copy()

    assert shallow.human is trophy.human


def test_snapshot_clone_produces_independent_graph(tmp_path):
    trophy = Trophy(human=Human(name="ZhangSan"))
    scratch = tmp_path / "a.txt"

    trophy2 = snapshot_clone(trophy, scratch)
    trophy2.set_name("LiSi")

    assert scratch.exists()
    assert trophy2.human is not trophy.human
    assert trophy.get_name() == "ZhangSan"


def test_snapshot_clone_defaults_to_configured_path(monkeypatch, tmp_path):
    target = tmp_path / "custom.json"
    monkeypatch.setenv("CREATIONAL_SCRATCH_PATH", str(target))

    snapshot_clone(Sheep(name="lazySheep"))

    assert target.exists()


def test_snapshot_clone_wraps_io_errors(tmp_path):
    missing_dir = tmp_path / "missing" / "a.txt"

    with pytest.raises(CloneError) as excinfo:
        snapshot_clone(Sheep(name="lazySheep"), missing_dir)

    assert isinstance(excinfo.value, RuntimeError)
    assert isinstance(excinfo.value.__cause__, OSError)


class Holder(BaseModel):
    payload: Any = None


def test_snapshot_clone_wraps_save_format_errors(tmp_path):
    scratch = tmp_path / "a.txt"
    scratch.write_text("previous run", encoding="utf-8")

    with pytest.raises(CloneError) as excinfo:
        snapshot_clone(Holder(payload=object()), scratch)

    assert isinstance(excinfo.value.__cause__, PydanticSerializationError)
    assert scratch.read_text(encoding="utf-8") == "previous run"


def test_snapshot_clone_wraps_reconstruct_errors(tmp_path):
    class Strict(BaseModel):
        value: int

        def model_dump_json(self, **kwargs) -> str:
            return '{"value": "not-a-number"}'

    with pytest.raises(CloneError) as excinfo:
        snapshot_clone(Strict(value=1), tmp_path / "a.txt")

    assert excinfo.value.__cause__ is not None


def test_prototype_demo_output(capsys):
    outcome = run_prototype_demo()

    assert capsys.readouterr().out.splitlines() == ["lazySheep", "duoLi", "False"]
    assert outcome.original.name == "lazySheep"


@pytest.mark.parametrize("use_snapshot", [False, True])
def test_deep_prototype_demo_output(capsys, settings, use_snapshot):
    outcome = run_deep_prototype_demo(use_snapshot=use_snapshot, settings=settings)

    assert capsys.readouterr().out.splitlines() == ["ZhangSan", "LiSi"]
    assert outcome.clone.human is not outcome.original.human


def test_equal_inputs_give_equal_prototypes():
    assert Sheep(name="lazySheep") == Sheep(name="lazySheep")
    assert Sheep(name="lazySheep") is not Sheep(name="lazySheep")

    trophy = Trophy(human=Human(name="ZhangSan"))
    first, second = trophy.clone(), trophy.clone()

    assert first == second
    assert first.human is not second.human
