# Supabase Auth
# This module uses Supabase's built-in authentication system
# No custom tables are required - Supabase Auth handles:
# - User registration (auth.users table)
# - Email/password sign-in and session tokens
# - JWT validation

"""
Supabase Auth provides:
- auth.sign_up() - Register new users
- auth.sign_in_with_password() - Authenticate users
- auth.get_user() - Resolve a user from an access token
- auth.sign_out() - End the session

A user is only an id and an email from this application's point of view.
Rows in `allergies` and `scan_history` reference auth.users.id via user_id.
"""
