"""SkillGenie: questionnaire-driven learning recommendations."""
