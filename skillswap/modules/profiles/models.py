# Supabase table: profiles
# This file documents the expected database schema
# Actual operations are handled via Supabase SDK in service.py
# Authentication is handled by Supabase Auth (auth.users table)

"""
Expected Supabase table structure:

profiles:
- id: uuid (primary key)
- user_id: uuid (unique, not null) - auth.users.id
- full_name: text (not null)
- location: text (nullable)
- bio: text (nullable)
- is_public: boolean (not null, default: true)
- profile_photo: text (nullable) - public URL of the uploaded photo
- created_at: timestamp (default: now())
- updated_at: timestamp (default: now())

One profile per user, written with upsert on user_id. Only profiles
with is_public = true show up in browse results.
"""
