"""Relatório de silences do Alertmanager publicado no Slack.

Este pacote contém:
- constants: variáveis de ambiente e limites do Slack
- models: silences, matchers e blocos de mensagem
- utils: utilitários de formatação e helpers
- formatters: renderização de cada silence e do resumo
- report: montagem dos lotes de mensagens (paginação)
- alertmanager: leitura dos silences via API do Alertmanager
- services: integração com serviços externos (Slack)
- cli: linha de comando
"""

__version__ = "0.2.0"
