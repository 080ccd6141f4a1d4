GIT_CONFIG_BASE_NAME = "gitdircache"

GIT_CONFIG_ROOT_DIR = f"{GIT_CONFIG_BASE_NAME}.rootdir"
"""git config key for the cache root dir"""
GIT_CONFIG_CLONE_MODE = f"{GIT_CONFIG_BASE_NAME}.clonemode"
"""git config key for the clone mode (bare or mirror)"""
GIT_CONFIG_HEARTBEAT_INTERVAL = f"{GIT_CONFIG_BASE_NAME}.heartbeatinterval"
"""git config key for the lease heartbeat interval, in seconds"""
GIT_CONFIG_LOCK_EXPIRY = f"{GIT_CONFIG_BASE_NAME}.lockexpiry"
"""git config key for the lease expiry threshold, in seconds"""
GIT_CONFIG_POLL_INTERVAL = f"{GIT_CONFIG_BASE_NAME}.pollinterval"
"""git config key for the waiter poll interval, in seconds"""
