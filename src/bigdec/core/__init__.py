"""
Core value model, numeric algorithms, text codecs and contracts.

Этот пакет не зависит от BigEngine: все операции принимают конфигурацию
или её параметры явно.
"""
