# Supabase table: swap_requests
# This file documents the expected database schema
# Actual operations are handled via Supabase SDK in service.py

"""
Expected Supabase table structure:

swap_requests:
- id: uuid (primary key)
- requester_id: uuid (not null) - user who sent the request
- requested_user_id: uuid (not null) - user who receives it
- offered_skill_id: uuid (foreign key to skills.id, not null) - requester's offering skill
- wanted_skill_id: uuid (foreign key to skills.id, not null) - requested user's offering skill
- message: text (nullable)
- status: text (not null, default: 'pending') - values: pending, accepted, rejected, completed
- created_at: timestamp (default: now())
- updated_at: timestamp (default: now())

Status changes go through transitions.TRANSITIONS; see that module for
which participant may move a request from which status.
"""
