# Supabase table: skills
# This file documents the expected database schema
# Actual operations are handled via Supabase SDK in service.py

"""
Expected Supabase table structure:

skills:
- id: uuid (primary key)
- user_id: uuid (not null) - owner, auth.users.id
- skill_name: text (not null)
- description: text (nullable)
- experience_level: text (not null) - values: Beginner, Intermediate, Expert
- skill_type: text (not null) - values: offering, wanted
- is_priority: boolean (nullable, default: false)
- created_at: timestamp (default: now())

A user has many skills. Name uniqueness per (user_id, skill_type) is
checked case-insensitively by SkillService, not by the table.
"""
