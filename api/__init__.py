"""HTTP routers for the BizTime API."""
