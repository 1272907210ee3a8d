"""
plans table:
- code: text (primary key, e.g. free | pro | premium)
- name: text
- price_usd: numeric
- features: jsonb {ai: {...}, limits: {...}, modules: {...}, features_list: [...]}
- stripe_price_id: text (nullable)
- is_active: bool
- created_at: timestamp
"""
