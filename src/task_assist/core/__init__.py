# src/task_assist/core/__init__.py
"""
Core do Task Assist.

Reúne as peças que compõem a instância de configuração:
    - config: merge recursivo, exceções, hashing e loader de arquivos
    - paths: seções input/output com resolução raw ou unida à raiz
    - options: blocos de opções nomeados
    - status: flags compartilhadas entre tarefas
    - tasks: descritores e agendador de tarefas
    - assist: `TaskAssist`

Invariantes:
    - Nenhuma operação do core é assíncrona
    - Somente `config.loader` lê arquivos
"""
