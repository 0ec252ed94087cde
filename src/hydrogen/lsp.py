"""Minimal LSP server for Hydrogen, diagnostics only."""

from __future__ import annotations

from lsprotocol.types import (
    TEXT_DOCUMENT_DID_CHANGE,
    TEXT_DOCUMENT_DID_OPEN,
    Diagnostic,
    DiagnosticSeverity,
    DidChangeTextDocumentParams,
    DidOpenTextDocumentParams,
    Position,
    PublishDiagnosticsParams,
    Range,
    TextDocumentSyncKind,
)
from pygls.lsp.server import LanguageServer

from hydrogen import __version__
from hydrogen.errors import LexError, ParseError
from hydrogen.parser import parse_source

server = LanguageServer("hydrogen-lsp", __version__, text_document_sync_kind=TextDocumentSyncKind.Full)


def _diagnostic(exc: LexError | ParseError, width: int) -> Diagnostic:
    line = exc.position.line - 1
    col = exc.position.column - 1
    return Diagnostic(
        range=Range(
            start=Position(line=line, character=col),
            end=Position(line=line, character=col + width),
        ),
        message=exc.message,
        severity=DiagnosticSeverity.Error,
        source="hydrogen",
    )


def _validate(ls: LanguageServer, uri: str) -> None:
    """Tokenize and parse the document and publish diagnostics."""
    doc = ls.workspace.get_text_document(uri)
    diagnostics: list[Diagnostic] = []

    try:
        parse_source(doc.source)
    except LexError as exc:
        diagnostics.append(_diagnostic(exc, 1))
    except ParseError as exc:
        diagnostics.append(_diagnostic(exc, exc.width))

    ls.text_document_publish_diagnostics(
        PublishDiagnosticsParams(uri=uri, diagnostics=diagnostics)
    )


@server.feature(TEXT_DOCUMENT_DID_OPEN)
def did_open(ls: LanguageServer, params: DidOpenTextDocumentParams) -> None:
    _validate(ls, params.text_document.uri)


@server.feature(TEXT_DOCUMENT_DID_CHANGE)
def did_change(ls: LanguageServer, params: DidChangeTextDocumentParams) -> None:
    _validate(ls, params.text_document.uri)


def main() -> None:
    server.start_io()
