# Supabase table: allergies
# This file documents the expected database schema
# Actual operations are handled via Supabase SDK in service.py

"""
Expected Supabase table structure:
- id: uuid (primary key, default: gen_random_uuid())
- user_id: uuid (foreign key to auth.users.id, not null)
- name: text (not null)
- severity: text (not null, one of 'mild' | 'moderate' | 'severe', default: 'mild')
- notes: text (nullable)
- created_at: timestamp (default: now())

No uniqueness constraint on (user_id, name); duplicates are allowed.
Row-level policy: a user can only select/insert/update/delete rows where user_id = auth.uid().
"""
