"""Git configuration operations sub-gateway.

Import from submodules:
- abc: GitConfigOps
- real: RealGitConfigOps
- fake: FakeGitConfigOps
- dry_run: DryRunGitConfigOps
- printing: PrintingGitConfigOps
- types: ConfigWritten, ConfigWriteError
"""
