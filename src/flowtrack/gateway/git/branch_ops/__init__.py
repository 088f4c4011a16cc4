"""Git branch operations sub-gateway.

Import from submodules:
- abc: GitBranchOps
- real: RealGitBranchOps
- fake: FakeGitBranchOps
- dry_run: DryRunGitBranchOps
- printing: PrintingGitBranchOps
- types: RebaseMode, BranchCreated, BranchCreateError, CheckoutStatus, CheckoutResult
"""
