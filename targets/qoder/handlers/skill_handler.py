"""Qoder skill handler. Skills are relocated, never rewritten."""

from core.bundle_models import BundleSkillDir
from core.naming import normalize_name
from core.plugin_models import ClaudeSkill
from core.target_interface import EntityType
from targets.shared.entity_handler import EntityHandler


class QoderSkillHandler(EntityHandler):

    @property
    def entity_type(self) -> EntityType:
        return EntityType.SKILL

    def convert(self, skill: ClaudeSkill) -> BundleSkillDir:
        return BundleSkillDir(name=normalize_name(skill.name), source_dir=skill.source_dir)
