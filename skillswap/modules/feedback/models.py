# Supabase table: feedback
# This file documents the expected database schema
# Actual operations are handled via Supabase SDK in service.py

"""
Expected Supabase table structure:

feedback:
- id: uuid (primary key)
- swap_request_id: uuid (foreign key to swap_requests.id, not null)
- reviewer_id: uuid (not null) - participant leaving the feedback
- reviewee_id: uuid (not null) - the other participant
- rating: integer (not null) - 1 to 5
- comment: text (nullable)
- would_swap_again: boolean (not null, default: true)
- created_at: timestamp (default: now())

FeedbackService allows one row per (swap_request_id, reviewer_id) and only
for completed swaps.
"""
