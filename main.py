from app import FlipbookApp
from pack_builder import build_manifest
import config

def main():
    if config.RUN_PACK_BUILDER == True:
       build_manifest(config.ASSETS_PATH, config.PACK_MANIFEST)
    FlipbookApp().run()

if __name__ == "__main__":
    main()
