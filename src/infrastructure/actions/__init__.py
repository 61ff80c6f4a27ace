"""Automation platform contexts"""
from src.infrastructure.actions.github_actions_context import GitHubActionsContext

__all__ = ["GitHubActionsContext"]
