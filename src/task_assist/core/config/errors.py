# src/task_assist/core/config/errors.py
"""
Exceções canônicas da camada de configuração do Task Assist.

Este módulo define a hierarquia de exceções usadas durante o merge de
opções, a resolução de caminhos e o carregamento de arquivos de
configuração declarativa.

Princípios fundamentais:
    - Exceções são tipadas e semânticas
    - Erros estruturais são tratados como falhas fatais
    - A única condição não fatal (direção inválida em set_path/get_path)
      não é representada aqui: ela é registrada em log

Invariantes:
    - Todas as exceções de configuração herdam de `ConfigError`
    - Nenhuma exceção representa erro de execução de tarefa

Limites explícitos:
    - Não realiza fallback ou recovery
    - Não depende do registrador de tarefas
"""


class ConfigError(Exception):
    """
    Exceção base para erros relacionados à configuração do Task Assist.

    Permite captura genérica de falhas de merge, lookup de caminhos e
    carregamento de arquivos, sem confundir com erros das tarefas.
    """


class MergeTypeError(ConfigError, TypeError):
    """
    Exceção levantada quando o merge recebe algo que não é um dicionário
    no nível raiz.

    Exemplo:
        - object_merge({"a": 1}, ["b"])

    Limites explícitos:
        - Conflitos de tipo em níveis internos não são erro: o valor
          do lado `add` simplesmente sobrescreve o da base
    """


class UnknownPathTypeError(ConfigError, KeyError):
    """
    Exceção levantada quando `get_path` é chamado com um tipo de caminho
    que não existe na seção selecionada.

    Decisões arquiteturais:
        - A falha é a mesma nos modos raw e resolvido
        - O erro nunca é silenciado com um valor ausente
    """

    def __init__(self, direction: str, type_name: str) -> None:
        super().__init__(f"Tipo de caminho desconhecido em '{direction}': {type_name!r}")
        self.direction = direction
        self.type_name = type_name

    def __str__(self) -> str:
        return self.args[0]


class DefaultsNotFoundError(ConfigError):
    """
    Exceção levantada quando o arquivo de configuração base (defaults)
    não é encontrado no caminho especificado.
    """


class UnsupportedConfigFormatError(ConfigError):
    """
    Exceção levantada quando o formato do arquivo de configuração
    não é suportado pelo loader.

    Formatos suportados:
        - YAML (.yaml, .yml)
        - JSON (.json)
    """


class InvalidConfigRootTypeError(ConfigError):
    """
    Exceção levantada quando o conteúdo raiz de um arquivo de configuração
    não é um dicionário (`dict`).
    """


class InvalidConfigSectionError(ConfigError):
    """
    Exceção levantada quando um arquivo de configuração declara uma seção
    desconhecida ou com formato incompatível.

    Seções aceitas:
        - path   (input / output)
        - ext
        - options
        - status
    """
