"""Prompt templates and the prompt builder."""

from switchboard.prompts.builder import PromptBuilder
from switchboard.prompts.catalog import (
    DOMAIN_TEMPLATES,
    INTENT_TEMPLATES,
    PROMPT_TEMPLATES,
    WORKFLOW_TEMPLATES,
)
from switchboard.prompts.fragments import Persona
from switchboard.prompts.models import (
    INTENT_RUNTIME_KEYS,
    WORKFLOW_RUNTIME_KEYS,
    BuiltPrompt,
    PromptSections,
    PromptTemplate,
    TargetKind,
)
from switchboard.prompts.registry import PromptTemplateRegistry

__all__ = [
    "BuiltPrompt",
    "DOMAIN_TEMPLATES",
    "INTENT_RUNTIME_KEYS",
    "INTENT_TEMPLATES",
    "PROMPT_TEMPLATES",
    "Persona",
    "PromptBuilder",
    "PromptSections",
    "PromptTemplate",
    "PromptTemplateRegistry",
    "TargetKind",
    "WORKFLOW_RUNTIME_KEYS",
    "WORKFLOW_TEMPLATES",
]
