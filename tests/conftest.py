# tests/conftest.py
"""
Fixtures compartilhados para testes do Task Assist.

Este módulo define fixtures reutilizáveis que fornecem:
- uma instância de `TaskAssist` com raízes fixas
- um agendador de tarefas que apenas grava os registros recebidos
- conteúdos YAML de defaults e override local

Decisões arquiteturais:
    - Raízes são absolutas e fixas para que os caminhos esperados
      sejam determinísticos
    - O agendador de teste usa duck typing (não herda de nada)
    - Configurações YAML são fornecidas como string, sem I/O

Invariantes:
    - Nenhuma fixture executa tarefas
    - Nenhuma fixture acessa o filesystem
"""

import pytest


class RecordingScheduler:
    """Agendador de teste: grava cada chamada a `register_task`."""

    def __init__(self):
        self.calls = []

    def register_task(self, name, fn):
        self.calls.append((name, fn))


@pytest.fixture
def recording_scheduler() -> RecordingScheduler:
    return RecordingScheduler()


@pytest.fixture
def assist(recording_scheduler):
    """
    Fixture que fornece um `TaskAssist` com raízes `/src` e `/dist`.

    O agendador é o `RecordingScheduler`, permitindo inspecionar as
    tarefas registradas sem depender do `TaskRegistry`.
    """
    from task_assist.core.assist import TaskAssist

    return TaskAssist("/src", "/dist", scheduler=recording_scheduler)


@pytest.fixture
def assist_defaults_yaml() -> str:
    """
    Fixture que fornece um YAML de defaults semelhante ao uso real.

    Returns:
        str: Conteúdo YAML com caminhos, extensões, opções e status.
    """
    return """\
path:
  input:
    root: /project/src
    css: styles
    js: [app.js, vendor.js]
  output:
    root: /project/dist
ext:
  js: js
  css: scss
options:
  sass:
    outputStyle: expanded
    includePaths: [node_modules]
    autoprefixer:
      browsers: [last 2 versions]
      cascade: true
status:
  is_watching: false
"""


@pytest.fixture
def assist_local_yaml() -> str:
    """
    Fixture que fornece um YAML de override local.

    Returns:
        str: Conteúdo YAML apenas com os valores sobrescritos.
    """
    return """\
path:
  output:
    root: /tmp/build
options:
  sass:
    outputStyle: compressed
    includePaths: [vendor/sass]
    autoprefixer:
      cascade: false
"""
