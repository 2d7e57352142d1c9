# src/task_assist/core/paths.py
"""
Armazenamento de caminhos de entrada e saída.

Este módulo define o `PathStore`, responsável por manter duas seções de
caminhos (input e output), cada uma com uma raiz (`root`) e entradas
nomeadas relativas a essa raiz.

Uma entrada nomeada pode ser:
    - uma string (ex.: "styles")
    - uma lista ordenada de strings (ex.: ["a.js", "b.js"])

Resolução:
    - modo resolvido → cada valor é unido à raiz da seção
    - modo raw       → o valor armazenado é devolvido como está

Seleção de seção:
    - qualquer direção iniciada por "in" seleciona input
    - qualquer direção iniciada por "out" seleciona output
    - outros valores não selecionam nada (o chamador decide como reportar)

Limites explícitos:
    - Não verifica existência de arquivos ou diretórios
    - Não expande globs
    - Não realiza merge profundo (update é de um único nível)
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple, Union

from .config.errors import UnknownPathTypeError

PathValue = Union[str, List[str], Tuple[str, ...]]

INPUT = "input"
OUTPUT = "output"


def join_path(root: str, segment: str) -> str:
    """
    Une `segment` a `root` e normaliza o resultado.

    Um separador inicial em `segment` não descarta a raiz: a junção é
    sempre uma concatenação seguida de normalização.
    """
    parts = [p for p in (root, segment) if p]
    if not parts:
        return "."
    return os.path.normpath(os.sep.join(parts))


@dataclass
class PathSection:
    """Raiz de uma direção mais suas entradas nomeadas."""

    root: str
    entries: Dict[str, PathValue] = field(default_factory=dict)

    def update(self, new_entries: Dict[str, Any]) -> None:
        for key, value in new_entries.items():
            if key == "root":
                self.root = value
            else:
                self.entries[key] = value

    def get(self, type_name: str) -> PathValue:
        if type_name == "root":
            return self.root
        return self.entries[type_name]

    def __contains__(self, type_name: str) -> bool:
        return type_name == "root" or type_name in self.entries

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {"root": self.root}
        for key, value in self.entries.items():
            out[key] = list(value) if isinstance(value, (list, tuple)) else value
        return out


class PathStore:
    """
    Seções de caminhos input/output de uma instância de configuração.

    Invariantes:
        - Existem exatamente duas seções, sempre com `root`
        - `update` nunca remove entradas, apenas adiciona ou sobrescreve
    """

    def __init__(self, input_root: str, output_root: str) -> None:
        self._sections: Dict[str, PathSection] = {
            INPUT: PathSection(root=input_root),
            OUTPUT: PathSection(root=output_root),
        }

    @staticmethod
    def resolve_direction(direction: Any) -> Optional[str]:
        if not isinstance(direction, str):
            return None
        if direction.startswith("in"):
            return INPUT
        if direction.startswith("out"):
            return OUTPUT
        return None

    @property
    def input_root(self) -> str:
        return self._sections[INPUT].root

    @property
    def output_root(self) -> str:
        return self._sections[OUTPUT].root

    def update(self, direction: str, new_entries: Dict[str, Any]) -> None:
        self._sections[direction].update(new_entries)

    def lookup(self, direction: str, type_name: str, raw: bool = False) -> PathValue:
        """
        Devolve o caminho `type_name` da seção `direction`.

        Args:
            direction (str): Seção já resolvida (`input` ou `output`).
            type_name (str): Nome da entrada.
            raw (bool): Quando True, devolve o valor sem unir à raiz.

        Returns:
            str | List[str]: Caminho (ou lista de caminhos) resolvido ou raw.

        Raises:
            UnknownPathTypeError: Se `type_name` não existir na seção.
        """
        section = self._sections[direction]
        if type_name not in section:
            raise UnknownPathTypeError(direction, type_name)

        value = section.get(type_name)
        if raw:
            return value
        if isinstance(value, (list, tuple)):
            return [join_path(section.root, v) for v in value]
        return join_path(section.root, value)

    def to_dict(self) -> Dict[str, Dict[str, Any]]:
        return {name: sec.to_dict() for name, sec in self._sections.items()}
