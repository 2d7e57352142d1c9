# src/task_assist/core/assist.py
"""
Instância de configuração compartilhada pelas tarefas de build.

Este módulo define o `TaskAssist`, o acumulador de configuração em memória
consultado pelas tarefas registradas em um agendador externo.

O TaskAssist consolida:
    - caminhos de entrada e saída (raiz + entradas nomeadas)
    - extensões de arquivo suportadas, indexadas por rótulo
    - blocos de opções nomeados com merge incremental
    - flags de status (tarefa principal, modo watch)
    - delegação do registro de tarefas

Fluxo típico:
    1. o código de build cria o TaskAssist com as raízes
    2. chama set_path / support_ext / set_option / set_task
    3. as tarefas, ao executar, leem caminhos e opções do mesmo objeto

Decisões arquiteturais:
    - Todas as mutações são síncronas e visíveis imediatamente
    - Não existe versionamento, snapshot interno ou rollback
    - Direção inválida em set_path/get_path é registrada em log e não é fatal
    - As tarefas compartilham a mesma instância sem nenhum lock: evitar
      escritas concorrentes no mesmo nome é responsabilidade do chamador

Limites explícitos:
    - Não executa tarefas
    - Não observa arquivos
    - Não realiza I/O
"""

from __future__ import annotations

import functools
import logging
import os
from typing import Any, Dict, Optional

from .config.hashing import compute_config_hash
from .options import OptionStore
from .paths import PathStore, PathValue
from .status import TaskStatus
from .tasks.descriptor import (
    BoundTask,
    CustomRegistration,
    InvalidTaskDescriptorError,
    TaskDescriptor,
)
from .tasks.registry import TaskRegistry, TaskScheduler

logger = logging.getLogger(__name__)

_MISSING: Any = object()


class TaskAssist:
    """
    Configuração compartilhada de uma execução de build.

    Args:
        input_root_path (Optional[str]): Raiz dos arquivos de entrada.
            Padrão: diretório de trabalho atual.
        output_root_path (Optional[str]): Raiz dos arquivos de saída.
            Padrão: diretório de trabalho atual.
        scheduler (Optional[TaskScheduler]): Agendador que recebe as
            tarefas registradas via `BoundTask`. Padrão: `TaskRegistry`.

    Invariantes:
        - `ext` e `status` são sempre os mesmos objetos (conteúdo mutável)
        - `options` é público e pode ser lido diretamente
        - As raízes só mudam via `set_path`
    """

    def __init__(
        self,
        input_root_path: Optional[str] = None,
        output_root_path: Optional[str] = None,
        *,
        scheduler: Optional[TaskScheduler] = None,
    ) -> None:
        base_dir = os.getcwd()
        self._paths = PathStore(
            input_root_path if input_root_path is not None else base_dir,
            output_root_path if output_root_path is not None else base_dir,
        )
        self._ext: Dict[str, str] = {}
        self._options = OptionStore()
        self._status = TaskStatus()
        self.scheduler: TaskScheduler = scheduler if scheduler is not None else TaskRegistry()

    # -----------------------------
    # Read-only views
    # -----------------------------
    @property
    def input_root_path(self) -> str:
        return self._paths.input_root

    @property
    def output_root_path(self) -> str:
        return self._paths.output_root

    @property
    def ext(self) -> Dict[str, str]:
        return self._ext

    @property
    def status(self) -> TaskStatus:
        return self._status

    @property
    def options(self) -> Dict[str, Any]:
        return self._options.blocks

    # -----------------------------
    # Paths
    # -----------------------------
    def set_path(self, direction: str = "", new_path: Optional[Dict[str, Any]] = None) -> Optional["TaskAssist"]:
        """
        Atualiza a seção de caminhos selecionada por `direction`.

        `new_path` é aplicado com sobrescrita de um único nível: passar
        `{"root": ...}` troca a raiz, passar `{"sass": "src/sass"}` adiciona
        ou sobrescreve uma entrada nomeada.

        Returns:
            TaskAssist | None: `self`, ou None quando a direção é inválida
            (nesse caso nada é alterado e um erro é registrado em log).
        """
        section = self._paths.resolve_direction(direction)
        if section is None:
            logger.error("set_path: invalid direction %r", direction)
            return None

        self._paths.update(section, new_path or {})
        logger.debug("set_path: %s updated with %s", section, list(new_path or {}))
        return self

    def get_path(self, direction: str = "", type_name: str = "", raw: bool = False) -> Optional[PathValue]:
        """
        Devolve o caminho nomeado `type_name` da seção `direction`.

        Strings são unidas à raiz da seção; listas viram listas de caminhos
        unidos à raiz. Com `raw=True` o valor armazenado é devolvido sem
        alteração.

        Returns:
            str | List[str] | None: None apenas para direção inválida.

        Raises:
            UnknownPathTypeError: Se `type_name` não existir na seção.
        """
        section = self._paths.resolve_direction(direction)
        if section is None:
            logger.error("get_path: invalid direction %r", direction)
            return None

        return self._paths.lookup(section, type_name, raw=raw)

    # -----------------------------
    # Extensions & options
    # -----------------------------
    def support_ext(self, label: str, ext: str) -> "TaskAssist":
        self._ext[label] = ext
        return self

    def set_option(self, name: str = "", param: Any = _MISSING, diff: bool = True) -> "TaskAssist":
        """
        Grava um bloco de opções.

        Args:
            name (str): Nome do bloco.
            param (dict): Valores do bloco. Omitido → `{}`; um None
                explícito é gravado como None.
            diff (bool): True → merge com o bloco existente;
                False → substituição completa.
        """
        self._options.set(name, {} if param is _MISSING else param, diff=diff)
        return self

    # -----------------------------
    # Tasks
    # -----------------------------
    def set_task(self, name: str, descriptor: TaskDescriptor, bound_self: Any = None) -> "TaskAssist":
        """
        Registra a tarefa `name`.

        - `CustomRegistration`: chama `set_func(name, contexto)` e não faz
          mais nada
        - `BoundTask`: liga `task` ao contexto e entrega a função ao
          agendador, exatamente uma vez

        O contexto é `bound_self` quando informado, senão o próprio TaskAssist.

        Raises:
            InvalidTaskDescriptorError: Se o descritor não for uma das variantes.
        """
        context = bound_self if bound_self is not None else self

        if isinstance(descriptor, CustomRegistration):
            logger.debug("set_task: %r delegated to custom registration", name)
            descriptor.set_func(name, context)
        elif isinstance(descriptor, BoundTask):
            logger.debug("set_task: %r registered with %s", name, type(self.scheduler).__name__)
            self.scheduler.register_task(name, functools.partial(descriptor.task, context))
        else:
            raise InvalidTaskDescriptorError(
                f"set_task: descriptor for {name!r} must be BoundTask or CustomRegistration, "
                f"got {type(descriptor).__name__}"
            )

        return self

    # -----------------------------
    # Snapshot
    # -----------------------------
    def to_dict(self) -> Dict[str, Any]:
        """
        Snapshot do estado atual, sem compartilhar dicts ou listas com o
        TaskAssist. Valores de opção que não podem ser copiados entram por
        referência; no `fingerprint` eles são representados por `repr`.
        """
        return {
            "path": self._paths.to_dict(),
            "ext": dict(self._ext),
            "options": self._options.snapshot(),
            "status": self._status.to_dict(),
        }

    def fingerprint(self) -> str:
        return compute_config_hash(self.to_dict())

    def __repr__(self) -> str:
        return (
            f"TaskAssist(input_root_path={self.input_root_path!r}, "
            f"output_root_path={self.output_root_path!r})"
        )
