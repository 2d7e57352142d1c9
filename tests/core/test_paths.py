# tests/core/test_paths.py
"""
Testes de `set_path` / `get_path` do TaskAssist.

Os testes asseguram que:
- a direção é escolhida por prefixo ("in" / "out")
- set_path faz sobrescrita de um único nível (inclusive da raiz)
- strings e listas são unidas à raiz, ou devolvidas como estão em modo raw
- direção inválida é registrada em log, devolve None e não altera nada
- tipo de caminho desconhecido levanta `UnknownPathTypeError`
- as raízes são expostas apenas para leitura
"""

import logging
import os

import pytest

from task_assist.core.assist import TaskAssist
from task_assist.core.config.errors import ConfigError, UnknownPathTypeError
from task_assist.core.paths import join_path


def test_string_entry_is_joined_with_root(assist):
    assist.set_path("input", {"root": "/src"})
    assist.set_path("input", {"css": "styles"})
    assert assist.get_path("input", "css") == os.path.join("/src", "styles")
    assert assist.get_path("input", "css", raw=True) == "styles"


def test_list_entry_is_joined_element_wise(assist):
    """
    Verifica que listas viram listas de caminhos unidos à raiz,
    preservando a ordem, e que o modo raw devolve a lista armazenada.
    """
    assist.set_path("output", {"root": "/dist", "js": ["a.js", "b.js"]})
    assert assist.get_path("output", "js") == [
        os.path.join("/dist", "a.js"),
        os.path.join("/dist", "b.js"),
    ]
    assert assist.get_path("output", "js", raw=True) == ["a.js", "b.js"]


def test_direction_prefix_matching(assist):
    assist.set_path("inbound", {"img": "images"})
    assert assist.get_path("in", "img", raw=True) == "images"
    assist.set_path("out", {"img": "img"})
    assert assist.get_path("outgoing", "img") == os.path.join("/dist", "img")


def test_set_path_is_shallow(assist):
    assist.set_path("input", {"js": ["a.js", "b.js"], "css": "styles"})
    assist.set_path("input", {"js": ["c.js"]})
    assert assist.get_path("input", "js", raw=True) == ["c.js"]
    assert assist.get_path("input", "css", raw=True) == "styles"


def test_root_change_reflects_in_resolution(assist):
    assist.set_path("input", {"css": "styles"})
    assist.set_path("input", {"root": "/other"})
    assert assist.input_root_path == "/other"
    assert assist.get_path("input", "css") == os.path.join("/other", "styles")


def test_set_path_returns_self_for_chaining(assist):
    out = assist.set_path("input", {"a": "x"}).set_path("output", {"b": "y"})
    assert out is assist


def test_invalid_direction_logs_and_returns_none(assist, caplog):
    """
    Verifica a política não fatal para direção inválida.

    Invariantes:
        - Um registro de nível ERROR é emitido
        - O retorno é None
        - Nenhuma seção é alterada
    """
    before = assist.to_dict()
    with caplog.at_level(logging.ERROR, logger="task_assist"):
        assert assist.set_path("bogus", {"root": "/x"}) is None
        assert assist.get_path("bogus", "css") is None

    errors = [r for r in caplog.records if r.levelno == logging.ERROR]
    assert len(errors) == 2
    assert "invalid direction" in errors[0].getMessage()
    assert assist.to_dict() == before


def test_unknown_type_name_raises(assist):
    with pytest.raises(UnknownPathTypeError) as exc_info:
        assist.get_path("input", "missing")
    assert exc_info.value.type_name == "missing"
    assert exc_info.value.direction == "input"

    with pytest.raises(ConfigError):
        assist.get_path("output", "missing", raw=True)
    with pytest.raises(KeyError):
        assist.get_path("output", "missing")


def test_root_accessors_are_read_only(assist):
    with pytest.raises(AttributeError):
        assist.input_root_path = "/elsewhere"
    with pytest.raises(AttributeError):
        assist.output_root_path = "/elsewhere"
    assert assist.input_root_path == "/src"
    assert assist.output_root_path == "/dist"


def test_default_roots_are_working_directory():
    assist = TaskAssist()
    assert assist.input_root_path == os.getcwd()
    assert assist.output_root_path == os.getcwd()


def test_join_path_normalizes():
    assert join_path("/src", "a/../b") == os.path.normpath("/src/b")
    assert join_path("/src/", "/abs") == os.path.normpath("/src/abs")
    assert join_path("", "styles") == "styles"
    assert join_path("", "") == "."
