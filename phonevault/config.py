import os
from dotenv import load_dotenv
load_dotenv()

STORAGE_PATH = os.getenv("STORAGE_PATH", "./_data")
KEY_STORE_FILE = os.getenv("KEY_STORE_FILE", "keys.json")
KEY_STORE_PATH = os.path.join(STORAGE_PATH, KEY_STORE_FILE)
# Nombre lógico del hueco donde se guarda la clave hex.
KEY_SLOT = os.getenv("KEY_SLOT", "phoneEncryptionKey")
