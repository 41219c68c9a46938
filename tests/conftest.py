import os

# Must be set before prepper.core.config is first imported.
os.environ.setdefault('JWT_SECRET_KEY', 'test-secret-key-that-is-long-enough-for-hs256')
os.environ.setdefault('BCRYPT_ROUNDS', '4')
os.environ.setdefault('DB_FILE', os.path.join(os.path.dirname(__file__), '.test-db.json'))
