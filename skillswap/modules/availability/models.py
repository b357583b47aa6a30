# Supabase table: availability
# This file documents the expected database schema
# Actual operations are handled via Supabase SDK in service.py

"""
Expected Supabase table structure:

availability:
- id: uuid (primary key)
- user_id: uuid (unique, not null) - one row per user
- days: text[] (not null) - subset of Monday..Sunday
- time_slots: text[] (not null) - subset of Morning, Afternoon, Evening
- created_at: timestamp (default: now())
- updated_at: timestamp (default: now())
"""
