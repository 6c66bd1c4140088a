"""Site identity resolution."""

from sfcli.identity.decisions import PromptDecision, decide_creator, decide_description, decide_site_root
from sfcli.identity.resolver import IdentityResolver

__all__ = ["IdentityResolver", "PromptDecision", "decide_creator", "decide_description", "decide_site_root"]
