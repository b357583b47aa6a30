# Supabase Auth
# Identity comes from Supabase's built-in authentication system.
# Sign-up, sign-in and session handling happen in the client against
# Supabase Auth directly; this service only verifies the bearer JWT.

"""
Supabase Auth provides:
- auth.get_user(jwt) - Resolve an access token to its user

The resolved user's id is the user_id stored on profiles, skills,
availability, swap_requests (requester_id / requested_user_id) and
feedback (reviewer_id / reviewee_id).
"""
