# Supabase table: scan_history
# This file documents the expected database schema
# Actual operations are handled via Supabase SDK in service.py

"""
Expected Supabase table structure:
- id: uuid (primary key, default: gen_random_uuid())
- user_id: uuid (foreign key to auth.users.id, not null)
- product_name: text (nullable)
- ingredients: text[] (not null) - extracted ingredient strings, in label order
- matched_allergies: text[] (not null) - allergy names as they were at scan time
- has_matches: boolean (not null)
- analysis: text (not null)
- created_at: timestamp (default: now())

Rows are written once per completed scan and never updated.
"""
