# -*- coding: utf-8 -*-
"""Exceções do pipeline de ranking de vídeos."""


class ChannelRankError(Exception):
    """Base de todos os erros do yt_rank."""


class ConfigurationError(ChannelRankError):
    """Configuração inválida (ex.: YOUTUBE_API_KEY ausente)."""


class NotFoundError(ChannelRankError):
    """Handle não corresponde a nenhum canal."""


class MalformedResponseError(ChannelRankError):
    """Resposta da API sem o campo esperado."""


class NetworkError(ChannelRankError):
    """Falha de transporte, timeout ou status HTTP de erro."""


class MissingCredentialError(ConfigurationError):
    """YOUTUBE_API_KEY ausente ou vazia."""
