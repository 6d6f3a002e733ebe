"""Drupal Tasks -- drush-driven maintenance pipelines for a Drupal project.

Core modules:
    config     -- Project configuration via pydantic-settings (DRUPAL_TASKS_* env
                  vars, .env file). Derives web/, backups/, checkup/ and scaffold/
                  paths from the project directory.
    cli        -- Click group exposing checkup:*, install:database, analyze:php,
                  scaffold and list. CLI flags passed as kwargs to ProjectConfig
                  (no env pollution). Exits with the failing step's exit code.
    collection -- TaskCollection: named steps run in order, first failure stops
                  the run.
    drush      -- DrushStack builder producing drush invocations bound to the
                  Drupal root and site URI.
    models     -- Command enum, per-command step order, result type.

Subpackages:
    tasks    -- Step primitives (subprocess exec, copy, chmod, concat, remove)
    commands -- One collection builder per CLI command
"""
