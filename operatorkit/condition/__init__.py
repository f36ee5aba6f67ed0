"""Status conditions for API objects: types, common constants, and list operations."""