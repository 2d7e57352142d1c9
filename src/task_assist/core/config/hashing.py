# src/task_assist/core/config/hashing.py
"""
Hash canônico do estado de configuração.

Permite comparar dois snapshots de `TaskAssist.to_dict()` sem comparar
estruturas aninhadas campo a campo, por exemplo para decidir se algo
mudou entre duas iterações de um loop de watch.

Política de hashing:
    - Serialização JSON canônica
    - Ordenação estável de chaves
    - Separadores compactos
    - Codificação UTF-8
    - Algoritmo SHA-256

Limites explícitos:
    - Valores não serializáveis em JSON são representados por `repr`
    - Não persiste o hash
"""

import hashlib
import json
from typing import Any, Dict


def compute_config_hash(config: Dict[str, Any]) -> str:
    """
    Calcula o hash SHA-256 hexadecimal de uma configuração.

    Args:
        config (Dict[str, Any]): Snapshot da configuração.

    Returns:
        str: Hash hexadecimal de 64 caracteres.

    Raises:
        TypeError: Se o objeto fornecido não for um dicionário.
    """
    if not isinstance(config, dict):
        raise TypeError(
            f"Config para hashing deve ser dict, recebido: {type(config).__name__}"
        )

    canonical_json = json.dumps(
        config,
        sort_keys=True,
        separators=(",", ":"),
        ensure_ascii=False,
        default=repr,
    )

    return hashlib.sha256(canonical_json.encode("utf-8")).hexdigest()
