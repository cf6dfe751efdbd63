"""Montagem do relatório de silences em lotes de mensagens do Slack.

O Slack aceita no máximo ``SLACK_BLOCK_LIMIT`` blocos por mensagem. Cada lote
reserva um header, o resumo (só no primeiro) e um divider; cada silence
ocupa uma section e um divider. Listas longas viram "Part i/N".
"""

from typing import List, Sequence

from .constants import BLOCKS_PER_RECORD, REPORT_TITLE, RESERVED_BLOCKS, SLACK_BLOCK_LIMIT
from .formatters import count_states, format_silence, format_summary
from .models import Divider, Header, MessageBatch, Section, Silence


def max_records_per_batch(block_limit: int = SLACK_BLOCK_LIMIT) -> int:
    return (block_limit - RESERVED_BLOCKS) // BLOCKS_PER_RECORD


def chunk_silences(silences: Sequence[Silence], size: int) -> List[Sequence[Silence]]:
    if size < 1:
        raise ValueError(f"tamanho de lote inválido: {size}")
    if not silences:
        # lista vazia ainda gera um lote com "Total: 0"
        return [silences[:0]]
    return [silences[i:i + size] for i in range(0, len(silences), size)]


class ReportBuilder:
    def __init__(self, title: str = REPORT_TITLE, block_limit: int = SLACK_BLOCK_LIMIT):
        self.title = title
        self.block_limit = block_limit
        self.records_per_batch = max_records_per_batch(block_limit)
        if self.records_per_batch < 1:
            raise ValueError(
                f"SLACK_BLOCK_LIMIT={block_limit} não comporta nenhum silence "
                f"(mínimo {RESERVED_BLOCKS + BLOCKS_PER_RECORD})"
            )

    def _header(self, index: int, total_parts: int) -> Header:
        if total_parts == 1:
            return Header(self.title)
        return Header(f"{self.title} (Part {index}/{total_parts})")

    def build(self, silences: Sequence[Silence]) -> List[MessageBatch]:
        silences = list(silences)
        counts = count_states(silences)
        chunks = chunk_silences(silences, self.records_per_batch)

        batches = []
        for index, chunk in enumerate(chunks, start=1):
            blocks = [self._header(index, len(chunks))]
            if index == 1:
                blocks.append(Section(format_summary(len(silences), counts)))
            blocks.append(Divider())
            for silence in chunk:
                blocks.append(Section(format_silence(silence)))
                blocks.append(Divider())
            batches.append(MessageBatch(tuple(blocks)))
        return batches


def build_report(silences: Sequence[Silence], title: str = REPORT_TITLE,
                 block_limit: int = SLACK_BLOCK_LIMIT) -> List[MessageBatch]:
    return ReportBuilder(title=title, block_limit=block_limit).build(silences)
