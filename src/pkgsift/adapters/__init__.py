"""Registry adapters — One connector per package registry.

Built-in adapters:
  - crates: crates.io search API
  - npm: npms.io search API
  - jsdelivr: jsDelivr package index (hosted on Algolia)
  - docker: Docker Hub v1 image search
  - composer: Packagist search API

Implement ``SearchAdapter`` and register it to add another registry.
"""
