# src/task_assist/core/config/loader.py
"""
Loader de configuração declarativa do Task Assist.

Este módulo permite descrever caminhos, extensões, opções e status em
arquivos YAML ou JSON, em vez de montá-los apenas por código.

A configuração é resolvida a partir de:
    - um arquivo de defaults (obrigatório)
    - um arquivo local de overrides (opcional)

Formato esperado:

    path:
      input:
        root: src
        css: styles
      output:
        root: dist
        js: [a.js, b.js]
    ext:
      js: js
    options:
      sass:
        outputStyle: compressed
    status:
      is_watching: false

Princípios fundamentais:
    - O override local tem prioridade sobre defaults (deep-merge)
    - Defaults nunca são mutados pelo override
    - Erros estruturais são falhas fatais

Limites explícitos:
    - Não registra tarefas (funções não são declaráveis em arquivo)
    - Não valida semântica das opções
    - É o único ponto do pacote que lê o filesystem
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any, Dict, Optional

import yaml  # PyYAML

from .errors import (
    DefaultsNotFoundError,
    InvalidConfigRootTypeError,
    InvalidConfigSectionError,
    UnsupportedConfigFormatError,
)
from .merge import deep_merge
from ..paths import PathStore

if TYPE_CHECKING:
    from ..assist import TaskAssist
    from ..tasks.registry import TaskScheduler

logger = logging.getLogger(__name__)

KNOWN_SECTIONS = ("path", "ext", "options", "status")
KNOWN_STATUS_FIELDS = ("main_task_id", "is_watching")


def _load_file(path: Path) -> Dict[str, Any]:
    """
    Carrega um arquivo de configuração e valida o tipo raiz.

    Arquivos vazios são interpretados como dicionários vazios.

    Raises:
        DefaultsNotFoundError: Se o arquivo não existir.
        UnsupportedConfigFormatError: Se a extensão não for suportada.
        InvalidConfigRootTypeError: Se o conteúdo raiz não for um dicionário.
    """
    if not path.exists():
        raise DefaultsNotFoundError(f"Arquivo de defaults não encontrado: {path}")

    suffix = path.suffix.lower()

    if suffix in {".yaml", ".yml"}:
        with path.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f)

    elif suffix == ".json":
        with path.open("r", encoding="utf-8") as f:
            data = json.load(f)

    else:
        raise UnsupportedConfigFormatError(f"Formato não suportado: {path.suffix}")

    if data is None:
        data = {}

    if not isinstance(data, dict):
        raise InvalidConfigRootTypeError(
            f"Config root deve ser dict, recebido: {type(data).__name__}"
        )

    logger.info("config loaded from %s", path)
    return data


def load_config(
    *,
    defaults_path: str,
    local_path: Optional[str] = None,
) -> Dict[str, Any]:
    """
    Carrega e resolve a configuração declarativa.

    Um `local_path` informado mas inexistente é ignorado.

    Args:
        defaults_path (str): Caminho do arquivo de configuração base.
        local_path (Optional[str]): Caminho opcional de overrides locais.

    Returns:
        Dict[str, Any]: Configuração resolvida.
    """
    effective = _load_file(Path(defaults_path))

    if local_path is not None:
        local_file = Path(local_path)
        if local_file.exists():
            effective = deep_merge(effective, _load_file(local_file))
        else:
            logger.debug("local config %s not found, using defaults only", local_file)

    return effective


def _require_mapping(value: Any, where: str) -> Dict[str, Any]:
    if not isinstance(value, dict):
        raise InvalidConfigSectionError(
            f"Seção '{where}' deve ser dict, recebido: {type(value).__name__}"
        )
    return value


def _validate_config(assist: "TaskAssist", config: Dict[str, Any]) -> Dict[str, Dict[str, Any]]:
    """
    Valida todas as seções de `config` sem tocar no `TaskAssist`.

    Returns:
        Dict[str, Dict[str, Any]]: Seções normalizadas, prontas para aplicar.

    Raises:
        InvalidConfigSectionError: Na primeira seção inválida encontrada.
    """
    unknown = sorted(set(config) - set(KNOWN_SECTIONS))
    if unknown:
        raise InvalidConfigSectionError(f"Seções desconhecidas: {unknown}")

    sections = {name: _require_mapping(config.get(name, {}), name) for name in KNOWN_SECTIONS}

    for direction, entries in sections["path"].items():
        if PathStore.resolve_direction(direction) is None:
            raise InvalidConfigSectionError(f"Direção de caminho inválida: {direction!r}")
        _require_mapping(entries, f"path.{direction}")

    for name, block in sections["options"].items():
        if name in assist.options and not (
            isinstance(assist.options[name], dict) and isinstance(block, dict)
        ):
            raise InvalidConfigSectionError(
                f"Opção '{name}' não pode ser mesclada: "
                f"{type(assist.options[name]).__name__} vs {type(block).__name__}"
            )

    for field_name in sections["status"]:
        if field_name not in KNOWN_STATUS_FIELDS:
            raise InvalidConfigSectionError(f"Campo de status desconhecido: {field_name!r}")

    return sections


def apply_config(assist: "TaskAssist", config: Dict[str, Any]) -> "TaskAssist":
    """
    Aplica uma configuração resolvida a um `TaskAssist` existente.

    Cada seção passa pelos setters públicos do TaskAssist, com as mesmas
    regras de quem monta a configuração por código:
        - path.input / path.output → set_path
        - ext                      → support_ext
        - options                  → set_option (modo diff)
        - status                   → atribuição direta das flags

    Toda a configuração é validada antes do primeiro setter: uma
    configuração rejeitada não deixa o TaskAssist parcialmente alterado.

    Raises:
        InvalidConfigSectionError: Para seções, direções ou campos inválidos.
    """
    sections = _validate_config(assist, config)

    for direction, entries in sections["path"].items():
        assist.set_path(direction, entries)

    for label, ext in sections["ext"].items():
        assist.support_ext(label, ext)

    for name, block in sections["options"].items():
        assist.set_option(name, block)

    for field_name, value in sections["status"].items():
        setattr(assist.status, field_name, value)

    return assist


def load_task_assist(
    *,
    defaults_path: str,
    local_path: Optional[str] = None,
    scheduler: Optional["TaskScheduler"] = None,
) -> "TaskAssist":
    """
    Cria um `TaskAssist` a partir de arquivos de configuração.

    As raízes vêm de `path.input.root` e `path.output.root`; quando
    ausentes, valem os defaults do próprio TaskAssist.
    """
    from ..assist import TaskAssist

    config = load_config(defaults_path=defaults_path, local_path=local_path)
    paths = _require_mapping(config.get("path", {}), "path")
    input_section = _require_mapping(paths.get("input", {}), "path.input")
    output_section = _require_mapping(paths.get("output", {}), "path.output")

    assist = TaskAssist(
        input_section.get("root"),
        output_section.get("root"),
        scheduler=scheduler,
    )
    return apply_config(assist, config)
